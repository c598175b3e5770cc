"""Request bodies accepted by the HTTP API."""

from typing import Literal

from pydantic import BaseModel, Field

ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]
Goal = Literal["lose", "maintain", "gain", "recomp"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class ParseNutritionBody(BaseModel):
    """Free-text food description to parse."""

    text: str | None = None


class LogMealBody(BaseModel):
    """Meal to parse and log."""

    text: str | None = None
    meal_type: MealType = "snack"


class OnboardingBody(BaseModel):
    """Answers collected by the onboarding flow."""

    goal: Goal
    activity_level: ActivityLevel
    height_cm: float | None = None
    weight_kg: float | None = None
    dietary_preferences: list[str] = Field(default_factory=list)


class ProfileUpdateBody(BaseModel):
    """Partial profile edit; only provided fields are applied."""

    display_name: str | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    goal: Goal | None = None
    activity_level: ActivityLevel | None = None
    daily_calories: int | None = Field(default=None, gt=0)
    daily_protein: int | None = Field(default=None, gt=0)
    daily_carbs: int | None = Field(default=None, gt=0)
    daily_fat: int | None = Field(default=None, gt=0)


class TargetPreviewBody(BaseModel):
    """Body stats for a target estimate."""

    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: str | None = None
    goal: str | None = None
