"""Supabase repository for meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macromate.domain.meals import MealRecord
from macromate.domain.nutrition import NutritionRecord
from macromate.services.meals import MealRepository

_MEAL_COLUMNS = (
    "id, user_id, name, description, calories, protein, carbs, fat, fiber, sugar, "
    "servings, meal_type, logged_at"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def create_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        nutrition: NutritionRecord,
        description: str,
        meal_type: str,
        logged_at: datetime,
    ) -> MealRecord:
        """Insert a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": nutrition.name,
                    "description": description,
                    "calories": nutrition.calories,
                    "protein": nutrition.protein_g,
                    "carbs": nutrition.carbs_g,
                    "fat": nutrition.fat_g,
                    "fiber": nutrition.fiber_g,
                    "sugar": nutrition.sugar_g,
                    "servings": nutrition.servings,
                    "meal_type": meal_type,
                    "logged_at": logged_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[MealRecord]:
        """Return meals in the time range, newest first."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, meal_id: UUID) -> MealRecord | None:
        """Return a meal by id."""
        response = (
            self.client.table("meals")
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()


def _parse_meal(row: dict[str, object]) -> MealRecord:
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        description=row.get("description"),
        calories=float(row.get("calories") or 0.0),
        protein_g=float(row.get("protein") or 0.0),
        carbs_g=float(row.get("carbs") or 0.0),
        fat_g=float(row.get("fat") or 0.0),
        fiber_g=float(row.get("fiber") or 0.0),
        sugar_g=float(row.get("sugar") or 0.0),
        servings=float(row.get("servings") or 1.0),
        meal_type=row.get("meal_type"),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
    )
