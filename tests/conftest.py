"""Shared fixtures for the test suite."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.db import get_session
from app.main import app
from app.targets.models import TargetInput

TODAY = date(2026, 6, 15)


# ---------------------------------------------------------------------------
# Fake DB session (no real Postgres needed)
# ---------------------------------------------------------------------------

class FakeSession:
    """Minimal stand-in for AsyncSession used in connector and endpoint tests."""

    def __init__(self, rows: list[dict[str, Any]] | None = None, rowcount: int = 1):
        self._rows = rows or []
        self.rowcount = rowcount
        self.statements: list[tuple[str, dict[str, Any] | None]] = []
        self.commits = 0
        self.rollbacks = 0

    async def execute(self, stmt, params=None):
        self.statements.append((str(stmt), params))
        return FakeResult(self._rows, self.rowcount)

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        self.rollbacks += 1

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


class FakeResult:
    def __init__(self, rows: list[dict[str, Any]], rowcount: int = 0):
        self._rows = rows
        self._keys = list(rows[0].keys()) if rows else []
        self.rowcount = rowcount

    def keys(self):
        return self._keys

    def fetchone(self):
        if not self._rows:
            return None
        return tuple(self._rows[0][k] for k in self._keys)

    def fetchall(self):
        return [tuple(r[k] for k in self._keys) for r in self._rows]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def fake_session():
    """Return a FakeSession with no rows (override _rows in tests if needed)."""
    return FakeSession()


@pytest.fixture()
def override_session(fake_session):
    """Override the FastAPI dependency so no real DB is needed."""
    async def _override():
        yield fake_session

    app.dependency_overrides[get_session] = _override
    yield fake_session
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_session):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_input(**overrides: Any) -> TargetInput:
    """30-year-old metric male, 80kg/180cm, cutting to 75kg at standard pace."""
    defaults: dict[str, Any] = dict(
        sex_at_birth="male",
        height_value=180.0,
        current_weight=80.0,
        birth_year=1996,
        birth_month=1,
        goal_type="fat_loss",
        pace="standard",
        units_system="metric",
        goal_weight=75.0,
        has_goal_weight=True,
        activity_multiplier=1.375,
        exercise_bump=0.0,
    )
    defaults.update(overrides)
    return TargetInput(**defaults)


def make_profile_row(**overrides: Any) -> dict[str, Any]:
    """Helper to build a fake profiles row dict."""
    row: dict[str, Any] = {
        "user_id": "user-1",
        "biological_sex": "male",
        "height_value": 180.0,
        "height_feet": None,
        "height_inches": None,
        "units_system": "metric",
        "current_weight": 80.0,
        "goal_weight": 75.0,
        "birth_year": 1996,
        "birth_month": 1,
        "birthdate": None,
        "primary_goal": "fat_loss",
        "pace": "standard",
        "weight_loss_rate": None,
        "activity_level": "lightly_active",
        "exercise_frequency": "none",
    }
    row.update(overrides)
    return row
