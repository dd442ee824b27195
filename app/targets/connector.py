"""Database connector — onboarding answers in, computed targets out.

Both directions go through the `profiles` table keyed by user_id. The
onboarding screens save biological_sex, height_value, units_system,
birth_year/birth_month, pace and primary_goal; profiles created by the
earlier account-creation flow only carry birthdate, height_feet/height_inches
and weight_loss_rate, which are used as fallbacks.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.targets.models import TargetInput, TargetResult
from app.targets.tables import (
    activity_multiplier_for,
    exercise_bump_for,
    goal_type_for,
    pace_for_weekly_rate,
)

logger = logging.getLogger(__name__)

ANSWER_COLUMNS = (
    "user_id",
    "biological_sex",
    "height_value",
    "height_feet",
    "height_inches",
    "units_system",
    "current_weight",
    "goal_weight",
    "birth_year",
    "birth_month",
    "birthdate",
    "primary_goal",
    "pace",
    "weight_loss_rate",
    "activity_level",
    "exercise_frequency",
)


class IncompleteAnswers(ValueError):
    """Stored profile lacks answers the calculation needs."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Onboarding answers incomplete: {', '.join(missing)}")


async def fetch_onboarding_answers(session: AsyncSession, user_id: str) -> dict[str, Any] | None:
    """Fetch the stored onboarding answers for a user.

    Returns None when no profile row exists.
    """
    query = (
        f"SELECT {', '.join(ANSWER_COLUMNS)} "
        "FROM profiles "
        "WHERE user_id = :user_id "
        "LIMIT 1"
    )
    result = await session.execute(text(query), {"user_id": user_id})
    row = result.fetchone()
    if row is None:
        return None
    columns = result.keys()
    return dict(zip(columns, row))


def _birth_year_month(row: dict[str, Any]) -> tuple[int, int] | None:
    year, month = row.get("birth_year"), row.get("birth_month")
    if year is not None and month is not None:
        return int(year), int(month)
    birthdate = row.get("birthdate")
    if birthdate is None:
        return None
    if isinstance(birthdate, str):
        birthdate = date.fromisoformat(birthdate[:10])
    return birthdate.year, birthdate.month


def _height(row: dict[str, Any]) -> float | None:
    """height_value, else feet/inches as total inches (imperial only)."""
    if row.get("height_value") is not None:
        return float(row["height_value"])
    feet = row.get("height_feet")
    if feet is None:
        return None
    return float(feet) * 12 + float(row.get("height_inches") or 0)


def answers_to_input(row: dict[str, Any]) -> TargetInput:
    """Map a profiles row onto the engine's input record.

    The goal-weight screen only saves goal_weight when the user sets one, so
    a stored goal weight means has_goal_weight. Raises IncompleteAnswers when
    sex, height, current weight or birth year/month are missing.
    """
    units_system = row.get("units_system")
    if units_system is None:
        # feet/inches are only entered in imperial mode
        units_system = "imperial" if row.get("height_feet") is not None else "metric"

    height_value = _height(row)
    birth = _birth_year_month(row)
    missing = [
        name
        for name, value in (
            ("biological_sex", row.get("biological_sex")),
            ("height", height_value),
            ("current_weight", row.get("current_weight")),
            ("birth_year_month", birth),
        )
        if value is None
    ]
    if missing:
        raise IncompleteAnswers(missing)

    current_weight = float(row["current_weight"])
    goal_weight = row.get("goal_weight")
    pace = row.get("pace") or pace_for_weekly_rate(row.get("weight_loss_rate"))

    return TargetInput(
        sex_at_birth=row["biological_sex"],
        height_value=height_value,
        current_weight=current_weight,
        birth_year=birth[0],
        birth_month=birth[1],
        goal_type=goal_type_for(row.get("primary_goal")),
        pace=pace,
        units_system=units_system,
        goal_weight=float(goal_weight) if goal_weight is not None else current_weight,
        has_goal_weight=goal_weight is not None,
        activity_multiplier=activity_multiplier_for(row.get("activity_level")),
        exercise_bump=exercise_bump_for(row.get("exercise_frequency")),
    )


async def save_targets(session: AsyncSession, user_id: str, targets: TargetResult) -> bool:
    """Write calories and macros to the profile and flag goals as configured.

    Returns False when no profile row matched. Storage errors propagate.
    """
    query = (
        "UPDATE profiles SET "
        "daily_calorie_target = :calories, "
        "macro_targets = CAST(:macros AS JSONB), "
        "goals_setup_completed = true, "
        "tdee_targets_enabled = true "
        "WHERE user_id = :user_id"
    )
    params = {
        "user_id": user_id,
        "calories": targets.calories,
        "macros": json.dumps(targets.macros.model_dump()),
    }
    result = await session.execute(text(query), params)
    if not result.rowcount:
        await session.rollback()
        return False
    await session.commit()
    logger.info("saved targets for user %s: %s kcal", user_id, targets.calories)
    return True
