"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macromate.adapters.openai_completion_client import OpenAICompletionClient
from macromate.adapters.supabase_meal_repository import SupabaseMealRepository
from macromate.adapters.supabase_profile_repository import SupabaseProfileRepository
from macromate.adapters.supabase_workout_repository import SupabaseWorkoutRepository
from macromate.config import Settings
from macromate.services.meals import MealLogService
from macromate.services.nutrition import NutritionParsingService
from macromate.services.profiles import ProfileService
from macromate.services.stats import StatsService
from macromate.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    nutrition_service: NutritionParsingService
    meal_log_service: MealLogService
    stats_service: StatsService
    workout_service: WorkoutService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_repository = SupabaseMealRepository(supabase_client)
    completion_client = OpenAICompletionClient.create(
        api_key=resolved_settings.ai_api_key,
        base_url=resolved_settings.ai_base_url,
    )
    nutrition_service = NutritionParsingService(
        client=completion_client,
        model=resolved_settings.ai_model,
        temperature=resolved_settings.nutrition_temperature,
    )
    workout_service = WorkoutService(
        client=completion_client,
        repository=SupabaseWorkoutRepository(supabase_client),
        model=resolved_settings.ai_model,
        temperature=resolved_settings.workout_temperature,
    )

    async def close_resources() -> None:
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        profile_service=ProfileService(SupabaseProfileRepository(supabase_client)),
        nutrition_service=nutrition_service,
        meal_log_service=MealLogService(
            nutrition_service=nutrition_service,
            repository=meal_repository,
        ),
        stats_service=StatsService(meal_repository),
        workout_service=workout_service,
        close_resources=close_resources,
    )
