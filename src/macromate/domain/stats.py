"""Domain models for dashboard and insights statistics."""

from dataclasses import dataclass
from datetime import date

from macromate.domain.meals import MealRecord


@dataclass(frozen=True)
class DailyTotals:
    """Summed macros for a single day."""

    day: date
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    meal_count: int = 0


@dataclass(frozen=True)
class MacroProgress:
    """Progress of one macro against its daily target."""

    current: float
    target: float
    progress: float
    remaining: float
    is_over: bool


@dataclass(frozen=True)
class DashboardSummary:
    """Day view with totals, meals and target progress."""

    totals: DailyTotals
    meals: list[MealRecord]
    calories: MacroProgress
    protein: MacroProgress
    carbs: MacroProgress
    fat: MacroProgress
    goal_reached: bool


@dataclass(frozen=True)
class MacroAverages:
    """Rounded average daily intake."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class MacroShare:
    """Calories contributed by one macro."""

    name: str
    calories: int


@dataclass(frozen=True)
class WeeklyInsights:
    """Seven-day analytics ending today."""

    days: list[DailyTotals]
    labels: list[str]
    averages: MacroAverages
    streak: int
    days_tracked: int
    macro_distribution: list[MacroShare]
    calorie_trend: str
