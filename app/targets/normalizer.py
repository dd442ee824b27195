"""Unit & age normalizer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

LB_TO_KG = 0.453592
IN_TO_CM = 2.54


@dataclass(frozen=True, slots=True)
class NormalizedBody:
    weight_kg: float
    height_cm: float
    age: int


def to_metric(current_weight: float, height_value: float, units_system: str) -> tuple[float, float]:
    """Return (weight_kg, height_cm). Imperial height is total inches."""
    if units_system == "imperial":
        return current_weight * LB_TO_KG, height_value * IN_TO_CM
    return current_weight, height_value


def age_from_birth(birth_year: int, birth_month: int, today: date) -> int:
    """Whole years; one less when the birth month is still ahead this year.

    Day of month is ignored.
    """
    age = today.year - birth_year
    if birth_month > today.month:
        age -= 1
    return age


def normalize_body(
    current_weight: float,
    height_value: float,
    units_system: str,
    birth_year: int,
    birth_month: int,
    today: date,
) -> NormalizedBody:
    weight_kg, height_cm = to_metric(current_weight, height_value, units_system)
    return NormalizedBody(
        weight_kg=weight_kg,
        height_cm=height_cm,
        age=age_from_birth(birth_year, birth_month, today),
    )
