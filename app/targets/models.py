"""Target calculation contract — Pydantic v2 models."""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class SexAtBirth(str, Enum):
    male = "male"
    female = "female"


class GoalType(str, Enum):
    fat_loss = "fat_loss"
    build_muscle = "build_muscle"
    get_stronger = "get_stronger"
    improve_health = "improve_health"
    maintain = "maintain"


class Pace(str, Enum):
    gentle = "gentle"
    standard = "standard"
    aggressive = "aggressive"


class UnitsSystem(str, Enum):
    metric = "metric"
    imperial = "imperial"


class TargetInput(BaseModel):
    """Snapshot of onboarding answers, supplied once per computation.

    goal_type and pace are plain strings: unrecognised values fall back to
    the table defaults instead of failing validation.
    """

    sex_at_birth: SexAtBirth
    height_value: float  # cm, or total inches when imperial
    current_weight: float  # kg or lb
    birth_year: int
    birth_month: int = Field(ge=1, le=12)
    goal_type: str = GoalType.maintain.value
    pace: str = Pace.standard.value
    units_system: UnitsSystem = UnitsSystem.metric
    goal_weight: float = 0.0  # same unit as current_weight
    has_goal_weight: bool = False
    activity_multiplier: float | None = 1.375  # None -> 1.375
    exercise_bump: float | None = 0.0


class Macros(BaseModel):
    protein: int
    carbs: int
    fat: int


class MacroPercents(BaseModel):
    protein: int
    carbs: int
    fat: int


class TargetResult(BaseModel):
    """Computed daily targets, the only value persisted to the profile."""

    calories: int
    macros: Macros
    macro_percents: MacroPercents
    goal_date: date | None = None


class ConfirmedTargets(BaseModel):
    targets: TargetResult
    goals_setup_completed: bool = True
    tdee_targets_enabled: bool = True
