"""Nutrition target pipeline.

normalize -> estimate TDEE -> allocate macros -> project goal date.
Single pass, no I/O, never raises for well-formed input.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from app.config import settings
from app.targets.allocator import allocate_macros, calorie_target, weight_in_pounds
from app.targets.energy import estimate_tdee
from app.targets.models import TargetInput, TargetResult
from app.targets.normalizer import normalize_body
from app.targets.projection import project_goal_date

logger = logging.getLogger(__name__)


def local_today(tz_name: str | None = None) -> date:
    return datetime.now(ZoneInfo(tz_name or settings.default_tz)).date()


def calculate_targets(data: TargetInput, today: date | None = None) -> TargetResult:
    """Compute calories, macros, macro percentages and the optional goal date."""
    today = today or local_today()
    sex = data.sex_at_birth.value
    units = data.units_system.value

    body = normalize_body(
        data.current_weight,
        data.height_value,
        units,
        data.birth_year,
        data.birth_month,
        today,
    )
    tdee = estimate_tdee(
        body.weight_kg,
        body.height_cm,
        body.age,
        sex,
        data.activity_multiplier,
        data.exercise_bump,
    )
    calories = calorie_target(
        tdee,
        sex,
        data.pace,
        data.has_goal_weight,
        data.goal_weight,
        data.current_weight,
    )
    macros, percents = allocate_macros(
        calories,
        data.goal_type,
        weight_in_pounds(data.current_weight, units),
    )
    goal_date = project_goal_date(
        data.has_goal_weight,
        data.goal_weight,
        data.current_weight,
        data.pace,
        today,
    )

    logger.debug(
        "targets: age=%s tdee=%s calories=%s macros=%s goal_date=%s",
        body.age, tdee, calories, macros.model_dump(), goal_date,
    )
    return TargetResult(
        calories=calories,
        macros=macros,
        macro_percents=percents,
        goal_date=goal_date,
    )
