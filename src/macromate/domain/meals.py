"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")


@dataclass(frozen=True)
class MealRecord:
    """Logged meal with its nutrition snapshot."""

    id: UUID
    user_id: UUID
    name: str
    description: str | None
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    sugar_g: float
    servings: float
    meal_type: str | None
    logged_at: datetime
