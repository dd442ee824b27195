"""Macro allocator — calorie target and protein/fat/carb split.

All grams are derived from the floored calorie target. Carbohydrates take
whatever energy protein and fat leave over; when that remainder is
negative, fat drops to its floor and carbs are recomputed. Protein is
never reduced.
"""

from __future__ import annotations

from app.targets.models import MacroPercents, Macros
from app.targets.rounding import round_half_up
from app.targets.tables import (
    FAT_G_PER_LB_FLOOR,
    GAIN_ADJUSTMENT_FACTOR,
    MIN_FAT_G,
    MIN_PROTEIN_G,
    get_goal_profile,
    get_pace,
    min_calories,
)

KG_TO_LB = 2.20462

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def calorie_target(
    tdee: int,
    sex: str,
    pace: str | None,
    has_goal_weight: bool,
    goal_weight: float,
    current_weight: float,
) -> int:
    """Daily calories: maintenance, halved surplus, or full deficit, then floored.

    The sex-dependent floor is applied after the pace adjustment.
    """
    adjustment = get_pace(pace).daily_adjustment_kcal
    is_gaining = has_goal_weight and goal_weight > current_weight

    if not has_goal_weight:
        calories = tdee
    elif is_gaining:
        calories = tdee + round_half_up(adjustment * GAIN_ADJUSTMENT_FACTOR)
    else:
        calories = tdee - adjustment

    return max(calories, min_calories(sex))


def weight_in_pounds(current_weight: float, units_system: str) -> float:
    if units_system == "imperial":
        return current_weight
    return current_weight * KG_TO_LB


def fat_floor_grams(weight_lb: float) -> int:
    return max(round_half_up(FAT_G_PER_LB_FLOOR * weight_lb), MIN_FAT_G)


def _carbs_from_remainder(calories: int, protein_g: int, fat_g: int) -> tuple[int, int]:
    """Return (remaining_kcal, carbs_g); carbs never go below zero."""
    remaining = calories - protein_g * KCAL_PER_G_PROTEIN - fat_g * KCAL_PER_G_FAT
    carbs_g = round_half_up(max(remaining, 0) / KCAL_PER_G_CARBS)
    return remaining, carbs_g


def macro_percents(protein_g: int, carbs_g: int, fat_g: int) -> MacroPercents:
    """Share of macro calories per nutrient.

    Each share is rounded on its own, so the three can sum to 99 or 101.
    """
    protein_kcal = protein_g * KCAL_PER_G_PROTEIN
    carbs_kcal = carbs_g * KCAL_PER_G_CARBS
    fat_kcal = fat_g * KCAL_PER_G_FAT
    total = protein_kcal + carbs_kcal + fat_kcal
    if total <= 0:
        return MacroPercents(protein=0, carbs=0, fat=0)
    return MacroPercents(
        protein=round_half_up(protein_kcal / total * 100),
        carbs=round_half_up(carbs_kcal / total * 100),
        fat=round_half_up(fat_kcal / total * 100),
    )


def allocate_macros(calories: int, goal_type: str | None, weight_lb: float) -> tuple[Macros, MacroPercents]:
    """Split `calories` into gram targets plus their calorie percentages."""
    profile = get_goal_profile(goal_type)

    protein_g = round_half_up(weight_lb * profile.protein_g_per_lb)
    fat_floor = fat_floor_grams(weight_lb)
    fat_g = max(round_half_up(calories * profile.fat_pct / KCAL_PER_G_FAT), fat_floor)

    remaining, carbs_g = _carbs_from_remainder(calories, protein_g, fat_g)
    if remaining < 0:
        fat_g = fat_floor
        remaining, carbs_g = _carbs_from_remainder(calories, protein_g, fat_g)

    # Protein floor is display-only: carbs above were balanced against the raw protein grams.
    shown_protein_g = max(protein_g, MIN_PROTEIN_G)

    macros = Macros(protein=shown_protein_g, carbs=carbs_g, fat=fat_g)
    return macros, macro_percents(shown_protein_g, carbs_g, fat_g)
