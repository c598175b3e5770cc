"""Meal logging, dashboard and insights endpoints."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from macromate.api.auth import current_user_id
from macromate.api.models import LogMealBody, ParseNutritionBody  # noqa: TC001
from macromate.api.params import resolve_day, resolve_timezone
from macromate.api.serializers import (
    dashboard_to_dict,
    insights_to_dict,
    meal_to_dict,
)

if TYPE_CHECKING:
    from macromate.containers import AppContainer

router = APIRouter(tags=["meals"])


@router.post("/nutrition/parse")
async def parse_nutrition(
    body: ParseNutritionBody,
    request: Request,
    _: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Estimate nutrition for a food description without saving it."""
    container: AppContainer = request.app.state.container
    record = await container.nutrition_service.parse(body.text or "")
    return {"nutrition": record.to_payload()}


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def log_meal(
    body: LogMealBody,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Parse a meal description and log it."""
    container: AppContainer = request.app.state.container
    meal = await container.meal_log_service.log_meal(
        user_id, body.text or "", meal_type=body.meal_type
    )
    return {"meal": meal_to_dict(meal)}


@router.get("/meals")
async def list_meals(
    request: Request,
    day: date | None = None,
    user_id: UUID = Depends(current_user_id),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return meals logged on a day, newest first."""
    container: AppContainer = request.app.state.container
    meals = container.meal_log_service.list_meals_for_day(
        user_id, resolve_day(timezone_name, day), timezone_name
    )
    return {"meals": [meal_to_dict(meal) for meal in meals]}


@router.delete("/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> None:
    """Delete a logged meal."""
    container: AppContainer = request.app.state.container
    container.meal_log_service.delete_meal(user_id, meal_id)


@router.get("/dashboard")
async def dashboard(
    request: Request,
    day: date | None = None,
    user_id: UUID = Depends(current_user_id),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return the day's totals and progress against targets."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    summary = container.stats_service.get_dashboard(
        user_id, profile.targets, resolve_day(timezone_name, day), timezone_name
    )
    return dashboard_to_dict(summary)


@router.get("/insights/week")
async def weekly_insights(
    request: Request,
    user_id: UUID = Depends(current_user_id),
    timezone_name: str = Depends(resolve_timezone),
) -> dict[str, object]:
    """Return analytics for the last seven days."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    insights = container.stats_service.get_week(
        user_id, profile.targets, timezone_name
    )
    return insights_to_dict(insights)
