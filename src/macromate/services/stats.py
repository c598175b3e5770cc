"""Dashboard and weekly insights statistics."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from macromate.domain.meals import MealRecord
from macromate.domain.stats import (
    DailyTotals,
    DashboardSummary,
    MacroAverages,
    MacroProgress,
    MacroShare,
    WeeklyInsights,
)
from macromate.domain.targets import DailyTargets
from macromate.numbers import round_half_up
from macromate.services.meals import MealRepository, day_bounds

WEEK_DAYS = 7
TREND_THRESHOLD_CALORIES = 100


@dataclass
class StatsService:
    """Service for computing per-day and per-week nutrition stats."""

    repository: MealRepository

    def get_dashboard(
        self,
        user_id: UUID,
        targets: DailyTargets,
        day: date,
        timezone_name: str,
    ) -> DashboardSummary:
        """Return totals, meals and target progress for a local day."""
        start, end = day_bounds(day, timezone_name)
        meals = self.repository.list_meals(user_id, start, end)
        totals = _aggregate_day(day, meals, ZoneInfo(timezone_name))
        calories = macro_progress(totals.calories, targets.calories)
        return DashboardSummary(
            totals=totals,
            meals=meals,
            calories=calories,
            protein=macro_progress(totals.protein_g, targets.protein_g),
            carbs=macro_progress(totals.carbs_g, targets.carbs_g),
            fat=macro_progress(totals.fat_g, targets.fat_g),
            goal_reached=calories.progress >= 100,  # noqa: PLR2004
        )

    def get_week(
        self,
        user_id: UUID,
        targets: DailyTargets,
        timezone_name: str,
        today: date | None = None,
    ) -> WeeklyInsights:
        """Return analytics for the seven days ending today."""
        tz = ZoneInfo(timezone_name)
        last_day = today or datetime.now(tz=tz).date()
        first_day = last_day - timedelta(days=WEEK_DAYS - 1)
        start, _ = day_bounds(first_day, timezone_name)
        _, end = day_bounds(last_day, timezone_name)
        meals = self.repository.list_meals(user_id, start, end)
        days = [
            _aggregate_day(first_day + timedelta(days=offset), meals, tz)
            for offset in range(WEEK_DAYS)
        ]
        return summarize_week(days, targets)


def macro_progress(current: float, target: float) -> MacroProgress:
    """Return progress of a macro against its target."""
    progress = min(current / target * 100, 100.0) if target > 0 else 0.0
    return MacroProgress(
        current=current,
        target=target,
        progress=progress,
        remaining=max(target - current, 0),
        is_over=current > target,
    )


def summarize_week(days: list[DailyTotals], targets: DailyTargets) -> WeeklyInsights:
    """Compute averages, streak and distribution for consecutive days."""
    tracked = [entry for entry in days if entry.calories > 0]
    divisor = len(tracked) or 1
    averages = MacroAverages(
        calories=round_half_up(sum(entry.calories for entry in days) / divisor),
        protein_g=round_half_up(sum(entry.protein_g for entry in days) / divisor),
        carbs_g=round_half_up(sum(entry.carbs_g for entry in days) / divisor),
        fat_g=round_half_up(sum(entry.fat_g for entry in days) / divisor),
    )
    streak = 0
    for entry in days:
        streak = streak + 1 if entry.meal_count > 0 else 0

    difference = averages.calories - targets.calories
    if difference > TREND_THRESHOLD_CALORIES:
        trend = "up"
    elif difference < -TREND_THRESHOLD_CALORIES:
        trend = "down"
    else:
        trend = "steady"

    return WeeklyInsights(
        days=days,
        labels=[entry.day.strftime("%a") for entry in days],
        averages=averages,
        streak=streak,
        days_tracked=len(tracked),
        macro_distribution=[
            MacroShare(name="Protein", calories=averages.protein_g * 4),
            MacroShare(name="Carbs", calories=averages.carbs_g * 4),
            MacroShare(name="Fat", calories=averages.fat_g * 9),
        ],
        calorie_trend=trend,
    )


def _aggregate_day(day: date, meals: list[MealRecord], tz: ZoneInfo) -> DailyTotals:
    total = DailyTotals(day=day, calories=0, protein_g=0, carbs_g=0, fat_g=0)
    for meal in meals:
        if meal.logged_at.astimezone(tz).date() != day:
            continue
        total = DailyTotals(
            day=day,
            calories=total.calories + meal.calories,
            protein_g=total.protein_g + meal.protein_g,
            carbs_g=total.carbs_g + meal.carbs_g,
            fat_g=total.fat_g + meal.fat_g,
            meal_count=total.meal_count + 1,
        )
    return total
