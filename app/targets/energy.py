"""Energy expenditure estimator: BMR and clamped activity multiplier."""

from __future__ import annotations

from app.targets.rounding import round_half_up
from app.targets.tables import DEFAULT_ACTIVITY_MULTIPLIER, MAX_ACTIVITY_MULTIPLIER


def bmr_mifflin_st_jeor(weight_kg: float, height_cm: float, age_years: int, sex: str) -> float:
    """Mifflin-St Jeor BMR formula. Returns kcal/day."""
    base = 10.0 * weight_kg + 6.25 * height_cm - 5.0 * age_years
    if sex == "male":
        return base + 5.0
    return base - 161.0


def effective_activity_multiplier(
    activity_multiplier: float | None = DEFAULT_ACTIVITY_MULTIPLIER,
    exercise_bump: float | None = 0.0,
) -> float:
    """Baseline multiplier plus exercise bump, never above 1.70."""
    if activity_multiplier is None:
        activity_multiplier = DEFAULT_ACTIVITY_MULTIPLIER
    if exercise_bump is None:
        exercise_bump = 0.0
    return min(activity_multiplier + exercise_bump, MAX_ACTIVITY_MULTIPLIER)


def estimate_tdee(
    weight_kg: float,
    height_cm: float,
    age_years: int,
    sex: str,
    activity_multiplier: float | None = DEFAULT_ACTIVITY_MULTIPLIER,
    exercise_bump: float | None = 0.0,
) -> int:
    bmr = bmr_mifflin_st_jeor(weight_kg, height_cm, age_years, sex)
    return round_half_up(bmr * effective_activity_multiplier(activity_multiplier, exercise_bump))
