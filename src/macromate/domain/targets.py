"""Domain models for daily macro targets."""

from dataclasses import dataclass

ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "very_active")
GOALS = ("lose", "maintain", "gain", "recomp")


@dataclass(frozen=True)
class BodyProfile:
    """Body stats and preferences used to estimate daily targets."""

    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: str | None = None
    goal: str | None = None


@dataclass(frozen=True)
class DailyTargets:
    """Daily calorie and macronutrient goals."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


DEFAULT_TARGETS = DailyTargets(calories=2000, protein_g=150, carbs_g=200, fat_g=65)
