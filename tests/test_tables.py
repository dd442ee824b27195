"""Tests for the onboarding answer lookup tables."""

from app.targets.tables import (
    GOAL_PROFILES,
    PACES,
    activity_multiplier_for,
    exercise_bump_for,
    get_goal_profile,
    get_pace,
    goal_type_for,
    min_calories,
    pace_for_weekly_rate,
)


class TestPaces:
    def test_three_paces(self):
        assert set(PACES) == {"gentle", "standard", "aggressive"}

    def test_adjustments_and_rates(self):
        assert (get_pace("gentle").daily_adjustment_kcal, get_pace("gentle").weekly_rate) == (250, 0.5)
        assert (get_pace("standard").daily_adjustment_kcal, get_pace("standard").weekly_rate) == (400, 0.8)
        assert (get_pace("aggressive").daily_adjustment_kcal, get_pace("aggressive").weekly_rate) == (550, 1.1)

    def test_unknown_falls_back_to_standard(self):
        assert get_pace("reckless") is PACES["standard"]
        assert get_pace(None) is PACES["standard"]
        assert get_pace("") is PACES["standard"]


class TestGoalProfiles:
    def test_five_goals(self):
        assert len(GOAL_PROFILES) == 5

    def test_fat_loss(self):
        g = get_goal_profile("fat_loss")
        assert g.protein_g_per_lb == 0.85
        assert g.fat_pct == 0.25

    def test_unknown_goal(self):
        g = get_goal_profile("nonexistent")
        assert g.protein_g_per_lb == 0.70
        assert g.fat_pct == 0.30
        assert get_goal_profile(None) == g


class TestAnswerMappings:
    def test_activity_levels(self):
        assert activity_multiplier_for("sedentary") == 1.2
        assert activity_multiplier_for("very_active") == 1.725

    def test_unknown_activity_level_is_default(self):
        assert activity_multiplier_for(None) == 1.375
        assert activity_multiplier_for("marathoner") == 1.375

    def test_exercise_frequency(self):
        assert exercise_bump_for("3_4") == 0.1
        assert exercise_bump_for(None) == 0.0
        assert exercise_bump_for("daily-ish") == 0.0

    def test_min_calories(self):
        assert min_calories("male") == 1500
        assert min_calories("female") == 1200


class TestLegacyAnswers:
    def test_weight_loss_goal(self):
        assert goal_type_for("weight_loss") == "fat_loss"
        assert goal_type_for("build_muscle") == "build_muscle"
        assert goal_type_for(None) == ""

    def test_rate_to_pace(self):
        assert pace_for_weekly_rate("0.5") == "gentle"
        assert pace_for_weekly_rate("1.0") == "standard"
        assert pace_for_weekly_rate(1.5) == "aggressive"

    def test_unreadable_rate_is_standard(self):
        assert pace_for_weekly_rate(None) == "standard"
        assert pace_for_weekly_rate("fast") == "standard"
