"""Meal logging service."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from macromate.domain.meals import MEAL_TYPES, MealRecord
from macromate.domain.nutrition import NutritionRecord
from macromate.services.errors import NotFoundError
from macromate.services.nutrition import NutritionParsingService


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def create_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        nutrition: NutritionRecord,
        description: str,
        meal_type: str,
        logged_at: datetime,
    ) -> MealRecord:
        """Create a meal row and return it."""

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals logged in [start, end), newest first."""

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal by id."""


@dataclass
class MealLogService:
    """Service that parses meal descriptions and persists meals."""

    nutrition_service: NutritionParsingService
    repository: MealRepository

    async def log_meal(
        self, user_id: UUID, text: str, meal_type: str = "snack"
    ) -> MealRecord:
        """Parse a free-text description and store the resulting meal."""
        if meal_type not in MEAL_TYPES:
            raise ValueError(f"Unknown meal type: {meal_type}")
        nutrition = await self.nutrition_service.parse(text)
        return self.repository.create_meal(
            user_id=user_id,
            nutrition=nutrition,
            description=text,
            meal_type=meal_type,
            logged_at=datetime.now(tz=UTC),
        )

    def list_meals_for_day(
        self, user_id: UUID, day: date, timezone_name: str
    ) -> list[MealRecord]:
        """Return meals logged on a local calendar day, newest first."""
        start, end = day_bounds(day, timezone_name)
        return self.repository.list_meals(user_id, start, end)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete one of the user's meals."""
        meal = self.repository.get_meal(meal_id)
        if meal is None or meal.user_id != user_id:
            raise NotFoundError("Meal not found")
        self.repository.delete_meal(meal_id)


def day_bounds(day: date, timezone_name: str) -> tuple[datetime, datetime]:
    """Return the UTC start and end of a local calendar day."""
    tz = ZoneInfo(timezone_name)
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start.astimezone(UTC), end.astimezone(UTC)
