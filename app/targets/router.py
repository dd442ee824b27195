"""Targets HTTP router — calculation, profile preview & confirm."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth import verify_api_key
from app.config import settings
from app.db import get_session
from app.targets import connector, tables
from app.targets.engine import calculate_targets
from app.targets.models import ConfirmedTargets, TargetInput, TargetResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/targets", tags=["targets"])


def _parse_date(value: str | None, name: str) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Invalid date for '{name}': {value}")


async def _load_input(session: AsyncSession, user_id: str) -> TargetInput:
    row = await connector.fetch_onboarding_answers(session, user_id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"No profile for user: {user_id}")
    try:
        return connector.answers_to_input(row)
    except (ValidationError, ValueError) as exc:
        logger.info("cannot compute targets for user %s: %s", user_id, exc)
        raise HTTPException(status_code=422, detail="Onboarding answers incomplete")


# ---------------------------------------------------------------------------
# /targets/reference
# ---------------------------------------------------------------------------


@router.get("/reference")
async def reference(
    _: str = Depends(verify_api_key),
) -> dict:
    return {
        "paces": [asdict(p) for p in tables.PACES.values()],
        "goal_types": [asdict(g) for g in tables.GOAL_PROFILES.values()],
        "activity_levels": tables.ACTIVITY_LEVELS,
        "exercise_frequencies": tables.EXERCISE_FREQUENCIES,
        "limits": {
            "default_activity_multiplier": tables.DEFAULT_ACTIVITY_MULTIPLIER,
            "max_activity_multiplier": tables.MAX_ACTIVITY_MULTIPLIER,
            "min_calories": {
                "male": tables.MIN_CALORIES_MALE,
                "female": tables.MIN_CALORIES_FEMALE,
            },
            "min_protein_g": tables.MIN_PROTEIN_G,
            "min_fat_g": tables.MIN_FAT_G,
        },
    }


# ---------------------------------------------------------------------------
# /targets/calculate
# ---------------------------------------------------------------------------


@router.post("/calculate", response_model=TargetResult)
async def calculate(
    body: TargetInput,
    _: str = Depends(verify_api_key),
    today: str | None = Query(default=None, description="Reference date (YYYY-MM-DD, default: today)"),
) -> TargetResult:
    return calculate_targets(body, _parse_date(today, "today"))


# ---------------------------------------------------------------------------
# /targets/profiles/{user_id}
# ---------------------------------------------------------------------------


@router.get("/profiles/{user_id}/preview", response_model=TargetResult)
async def preview_profile_targets(
    user_id: str,
    session: AsyncSession = Depends(get_session),
    _: str = Depends(verify_api_key),
    today: str | None = Query(default=None, description="Reference date (YYYY-MM-DD, default: today)"),
) -> TargetResult:
    """Compute targets from stored answers without saving them."""
    data = await _load_input(session, user_id)
    if settings.targets_preview_delay_seconds > 0:
        await asyncio.sleep(settings.targets_preview_delay_seconds)
    return calculate_targets(data, _parse_date(today, "today"))


@router.post("/profiles/{user_id}/confirm", response_model=ConfirmedTargets)
async def confirm_profile_targets(
    user_id: str,
    session: AsyncSession = Depends(get_session),
    _: str = Depends(verify_api_key),
    today: str | None = Query(default=None, description="Reference date (YYYY-MM-DD, default: today)"),
) -> ConfirmedTargets:
    """Recompute from stored answers and persist calories + macros."""
    data = await _load_input(session, user_id)
    targets = calculate_targets(data, _parse_date(today, "today"))

    try:
        saved = await connector.save_targets(session, user_id, targets)
    except SQLAlchemyError:
        logger.exception("failed to save targets for user %s", user_id)
        await session.rollback()
        raise HTTPException(status_code=503, detail="Failed to save targets")

    if not saved:
        raise HTTPException(status_code=404, detail=f"No profile for user: {user_id}")
    return ConfirmedTargets(targets=targets)
