"""Daily macro target calculation."""

import math

from macromate.domain.targets import BodyProfile, DailyTargets
from macromate.numbers import round_half_up, to_positive_float

DEFAULT_HEIGHT_CM = 170.0
DEFAULT_WEIGHT_KG = 70.0
DEFAULT_ACTIVITY_MULTIPLIER = 1.55
ASSUMED_AGE_YEARS = 30

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

GOAL_ADJUSTMENTS: dict[str, float] = {
    "lose": -500.0,
    "gain": 300.0,
}

PROTEIN_G_PER_KG = 2
FAT_CALORIE_SHARE = 0.25
CALORIES_PER_G_PROTEIN = 4
CALORIES_PER_G_CARBS = 4
CALORIES_PER_G_FAT = 9


def compute_daily_targets(profile: BodyProfile) -> DailyTargets:
    """Estimate daily calorie and macro targets from body stats.

    Uses the Mifflin-St Jeor equation with a fixed age of 30 and the male
    coefficient. Missing or invalid height and weight fall back to defaults,
    as do stats too large to give a finite energy estimate, so this never
    raises. Carbs are not clamped and can be negative when protein and fat
    exceed the calorie budget.
    """
    height_cm = to_positive_float(profile.height_cm) or DEFAULT_HEIGHT_CM
    weight_kg = to_positive_float(profile.weight_kg) or DEFAULT_WEIGHT_KG

    multiplier = ACTIVITY_MULTIPLIERS.get(
        profile.activity_level or "", DEFAULT_ACTIVITY_MULTIPLIER
    )
    adjustment = GOAL_ADJUSTMENTS.get(profile.goal or "", 0.0)
    tdee = _energy(height_cm, weight_kg) * multiplier + adjustment
    if not math.isfinite(tdee):
        height_cm, weight_kg = DEFAULT_HEIGHT_CM, DEFAULT_WEIGHT_KG
        tdee = _energy(height_cm, weight_kg) * multiplier + adjustment

    calories = round_half_up(tdee)
    protein_g = round_half_up(weight_kg * PROTEIN_G_PER_KG)
    fat_g = round_half_up(calories * FAT_CALORIE_SHARE / CALORIES_PER_G_FAT)
    carbs_g = round_half_up(
        (
            calories
            - protein_g * CALORIES_PER_G_PROTEIN
            - fat_g * CALORIES_PER_G_FAT
        )
        / CALORIES_PER_G_CARBS
    )
    return DailyTargets(
        calories=calories, protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g
    )


def _energy(height_cm: float, weight_kg: float) -> float:
    return 10 * weight_kg + 6.25 * height_cm - 5 * ASSUMED_AGE_YEARS + 5
