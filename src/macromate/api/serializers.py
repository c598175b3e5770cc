"""JSON shapes returned by the HTTP API."""

from macromate.domain.meals import MealRecord
from macromate.domain.profiles import Profile
from macromate.domain.stats import (
    DailyTotals,
    DashboardSummary,
    MacroProgress,
    WeeklyInsights,
)
from macromate.domain.targets import DailyTargets
from macromate.domain.workouts import WorkoutPlan


def targets_to_dict(targets: DailyTargets) -> dict[str, int]:
    return {
        "calories": targets.calories,
        "protein": targets.protein_g,
        "carbs": targets.carbs_g,
        "fat": targets.fat_g,
    }


def profile_to_dict(profile: Profile) -> dict[str, object]:
    return {
        "user_id": str(profile.user_id),
        "email": profile.email,
        "display_name": profile.display_name,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "goal": profile.goal,
        "activity_level": profile.activity_level,
        "dietary_preferences": profile.dietary_preferences,
        "daily_calories": profile.targets.calories,
        "daily_protein": profile.targets.protein_g,
        "daily_carbs": profile.targets.carbs_g,
        "daily_fat": profile.targets.fat_g,
        "onboarding_completed": profile.onboarding_completed,
    }


def meal_to_dict(meal: MealRecord) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "description": meal.description,
        "calories": meal.calories,
        "protein": meal.protein_g,
        "carbs": meal.carbs_g,
        "fat": meal.fat_g,
        "fiber": meal.fiber_g,
        "sugar": meal.sugar_g,
        "servings": meal.servings,
        "meal_type": meal.meal_type,
        "logged_at": meal.logged_at.isoformat(),
    }


def totals_to_dict(totals: DailyTotals) -> dict[str, object]:
    return {
        "date": totals.day.isoformat(),
        "calories": totals.calories,
        "protein": totals.protein_g,
        "carbs": totals.carbs_g,
        "fat": totals.fat_g,
        "meal_count": totals.meal_count,
    }


def progress_to_dict(progress: MacroProgress) -> dict[str, object]:
    return {
        "current": progress.current,
        "target": progress.target,
        "progress": progress.progress,
        "remaining": progress.remaining,
        "is_over": progress.is_over,
    }


def dashboard_to_dict(summary: DashboardSummary) -> dict[str, object]:
    return {
        "totals": totals_to_dict(summary.totals),
        "meals": [meal_to_dict(meal) for meal in summary.meals],
        "progress": {
            "calories": progress_to_dict(summary.calories),
            "protein": progress_to_dict(summary.protein),
            "carbs": progress_to_dict(summary.carbs),
            "fat": progress_to_dict(summary.fat),
        },
        "goal_reached": summary.goal_reached,
    }


def insights_to_dict(insights: WeeklyInsights) -> dict[str, object]:
    return {
        "days": [
            {"label": label, **totals_to_dict(day)}
            for label, day in zip(insights.labels, insights.days, strict=True)
        ],
        "averages": {
            "calories": insights.averages.calories,
            "protein": insights.averages.protein_g,
            "carbs": insights.averages.carbs_g,
            "fat": insights.averages.fat_g,
        },
        "streak": insights.streak,
        "days_tracked": insights.days_tracked,
        "macro_distribution": [
            {"name": share.name, "calories": share.calories}
            for share in insights.macro_distribution
        ],
        "calorie_trend": insights.calorie_trend,
    }


def workout_to_dict(plan: WorkoutPlan) -> dict[str, object]:
    return {
        "id": str(plan.id),
        "title": plan.title,
        "description": plan.description,
        "duration_minutes": plan.duration_minutes,
        "difficulty": plan.difficulty,
        "equipment": plan.equipment,
        "exercises": [
            exercise.model_dump(exclude_none=True) for exercise in plan.exercises
        ],
        "safety_notes": plan.safety_notes,
        "generated_at": plan.generated_at.isoformat(),
        "completed_at": plan.completed_at.isoformat() if plan.completed_at else None,
    }
