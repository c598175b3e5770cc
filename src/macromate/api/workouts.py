"""Workout plan endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from macromate.api.auth import current_user_id
from macromate.api.serializers import workout_to_dict
from macromate.domain.workouts import WorkoutRequest  # noqa: TC001

if TYPE_CHECKING:
    from macromate.containers import AppContainer

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.post("/generate", status_code=status.HTTP_201_CREATED)
async def generate_workout(
    body: WorkoutRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Generate a workout plan with the LLM and store it."""
    container: AppContainer = request.app.state.container
    plan = await container.workout_service.generate(user_id, body)
    return {"workout": workout_to_dict(plan)}


@router.get("")
async def list_workouts(
    request: Request, limit: int = 10, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's most recent workout plans."""
    container: AppContainer = request.app.state.container
    plans = container.workout_service.list_recent(user_id, limit=limit)
    return {"workouts": [workout_to_dict(plan) for plan in plans]}


@router.post("/{plan_id}/complete")
async def complete_workout(
    plan_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Mark a workout plan as completed."""
    container: AppContainer = request.app.state.container
    plan = container.workout_service.mark_completed(user_id, plan_id)
    return {"workout": workout_to_dict(plan)}
