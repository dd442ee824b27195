"""Goal date projector."""

from __future__ import annotations

import math
from datetime import date, timedelta

from app.targets.tables import get_pace


def weeks_to_goal(weight_diff: float, pace: str | None) -> int:
    return math.ceil(weight_diff / get_pace(pace).weekly_rate)


def project_goal_date(
    has_goal_weight: bool,
    goal_weight: float,
    current_weight: float,
    pace: str | None,
    today: date,
) -> date | None:
    """Date the goal weight is reached at the pace's weekly rate.

    None without a goal weight or when it equals the current weight. The
    difference is taken in whatever unit the weights were entered in, and
    the result is not bounded.
    """
    if not has_goal_weight or goal_weight == current_weight:
        return None
    weight_diff = abs(goal_weight - current_weight)
    return today + timedelta(days=weeks_to_goal(weight_diff, pace) * 7)
