"""Static lookup tables for onboarding answers — no DB, config only.

Each pace maps to a daily calorie adjustment and a weekly weight-change
rate; each goal type maps to a protein ratio and a fat share of calories.
Unknown keys fall back to the documented defaults and never raise.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ACTIVITY_MULTIPLIER = 1.375
MAX_ACTIVITY_MULTIPLIER = 1.70

MIN_CALORIES_MALE = 1500
MIN_CALORIES_FEMALE = 1200

MIN_PROTEIN_G = 50
MIN_FAT_G = 35
FAT_G_PER_LB_FLOOR = 0.25

# Surplus is half the deficit magnitude when the goal weight is above current.
GAIN_ADJUSTMENT_FACTOR = 0.5


@dataclass(frozen=True, slots=True)
class PaceProfile:
    pace: str
    daily_adjustment_kcal: int
    weekly_rate: float  # weight units per week, unit-agnostic
    label: str = ""


@dataclass(frozen=True, slots=True)
class GoalProfile:
    goal_type: str
    protein_g_per_lb: float
    fat_pct: float  # fraction of calories
    label: str = ""


PACES: dict[str, PaceProfile] = {
    "gentle": PaceProfile("gentle", daily_adjustment_kcal=250, weekly_rate=0.5, label="Gentle"),
    "standard": PaceProfile("standard", daily_adjustment_kcal=400, weekly_rate=0.8, label="Standard"),
    "aggressive": PaceProfile("aggressive", daily_adjustment_kcal=550, weekly_rate=1.1, label="Aggressive"),
}
DEFAULT_PACE = "standard"

GOAL_PROFILES: dict[str, GoalProfile] = {
    "fat_loss": GoalProfile("fat_loss", protein_g_per_lb=0.85, fat_pct=0.25, label="Fat loss"),
    "build_muscle": GoalProfile("build_muscle", protein_g_per_lb=0.80, fat_pct=0.27, label="Build muscle"),
    "get_stronger": GoalProfile("get_stronger", protein_g_per_lb=0.75, fat_pct=0.27, label="Get stronger"),
    "improve_health": GoalProfile("improve_health", protein_g_per_lb=0.70, fat_pct=0.30, label="Improve health"),
    "maintain": GoalProfile("maintain", protein_g_per_lb=0.70, fat_pct=0.30, label="Maintain"),
}
DEFAULT_GOAL_PROFILE = GoalProfile("default", protein_g_per_lb=0.70, fat_pct=0.30)

# Onboarding "activity level" answer -> baseline lifestyle multiplier
ACTIVITY_LEVELS: dict[str, float] = {
    "sedentary": 1.2,
    "lightly_active": 1.375,
    "moderately_active": 1.55,
    "very_active": 1.725,
}

# Onboarding "exercise frequency" answer (sessions/week) -> additive bump
EXERCISE_FREQUENCIES: dict[str, float] = {
    "none": 0.0,
    "1_2": 0.05,
    "3_4": 0.1,
    "5_plus": 0.15,
}


def get_pace(pace: str | None) -> PaceProfile:
    return PACES.get(pace or DEFAULT_PACE, PACES[DEFAULT_PACE])


def get_goal_profile(goal_type: str | None) -> GoalProfile:
    return GOAL_PROFILES.get(goal_type or "", DEFAULT_GOAL_PROFILE)


def activity_multiplier_for(activity_level: str | None) -> float:
    """Multiplier for a stored activity-level answer; 1.375 when unknown."""
    return ACTIVITY_LEVELS.get(activity_level or "", DEFAULT_ACTIVITY_MULTIPLIER)


def exercise_bump_for(exercise_frequency: str | None) -> float:
    return EXERCISE_FREQUENCIES.get(exercise_frequency or "", 0.0)


def min_calories(sex_at_birth: str) -> int:
    return MIN_CALORIES_MALE if sex_at_birth == "male" else MIN_CALORIES_FEMALE


# Earlier onboarding builds stored primary_goal="weight_loss" and a
# weight_loss_rate (lb/week) instead of a pace.
LEGACY_GOAL_TYPES: dict[str, str] = {
    "weight_loss": "fat_loss",
}


def goal_type_for(primary_goal: str | None) -> str:
    goal = primary_goal or ""
    return LEGACY_GOAL_TYPES.get(goal, goal)


def pace_for_weekly_rate(weight_loss_rate: str | float | None) -> str:
    """Pace for a stored lb/week rate: <=0.5 gentle, <=1.0 standard, else aggressive."""
    try:
        rate = float(weight_loss_rate)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return DEFAULT_PACE
    if rate <= 0.5:
        return "gentle"
    if rate <= 1.0:
        return "standard"
    return "aggressive"
