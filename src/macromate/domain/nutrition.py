"""Nutrition domain models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class UntrustedPayload:
    """Decoded JSON object from an LLM response that has not been sanitized."""

    data: dict[str, object]

    def get(self, key: str) -> object | None:
        """Return a raw value by key."""
        return self.data.get(key)


class NutritionRecord(BaseModel):
    """Sanitized nutrition estimate for a logged meal."""

    model_config = ConfigDict(frozen=True)

    name: str
    calories: float = Field(ge=0.0)
    protein_g: float = Field(ge=0.0)
    carbs_g: float = Field(ge=0.0)
    fat_g: float = Field(ge=0.0)
    fiber_g: float = Field(default=0.0, ge=0.0)
    sugar_g: float = Field(default=0.0, ge=0.0)
    servings: float = Field(default=1.0, ge=1.0)

    def to_payload(self) -> dict[str, object]:
        """Serialize using the same keys the LLM is asked to produce."""
        return {
            "name": self.name,
            "calories": self.calories,
            "protein": self.protein_g,
            "carbs": self.carbs_g,
            "fat": self.fat_g,
            "fiber": self.fiber_g,
            "sugar": self.sugar_g,
            "servings": self.servings,
        }
