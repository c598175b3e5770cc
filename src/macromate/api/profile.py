"""Profile, onboarding and target endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from macromate.api.auth import current_user_id, require_api_token
from macromate.api.models import (  # noqa: TC001
    OnboardingBody,
    ProfileUpdateBody,
    TargetPreviewBody,
)
from macromate.api.serializers import profile_to_dict, targets_to_dict
from macromate.domain.targets import BodyProfile
from macromate.services.targets import compute_daily_targets

if TYPE_CHECKING:
    from macromate.containers import AppContainer

router = APIRouter(tags=["profile"])


@router.get("/profile")
async def get_profile(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's profile."""
    container: AppContainer = request.app.state.container
    return {"profile": profile_to_dict(container.profile_service.get_profile(user_id))}


@router.post("/profile/onboarding")
async def complete_onboarding(
    body: OnboardingBody,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Save onboarding answers and computed daily targets."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.complete_onboarding(
        user_id,
        goal=body.goal,
        activity_level=body.activity_level,
        height_cm=body.height_cm,
        weight_kg=body.weight_kg,
        dietary_preferences=body.dietary_preferences,
    )
    return {"profile": profile_to_dict(profile)}


@router.patch("/profile")
async def update_profile(
    body: ProfileUpdateBody,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Apply a partial profile update."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.update_profile(
        user_id, body.model_dump(exclude_unset=True)
    )
    return {"profile": profile_to_dict(profile)}


@router.post("/targets/preview", dependencies=[Depends(require_api_token)])
async def preview_targets(body: TargetPreviewBody) -> dict[str, object]:
    """Compute daily targets without saving them."""
    targets = compute_daily_targets(
        BodyProfile(
            height_cm=body.height_cm,
            weight_kg=body.weight_kg,
            activity_level=body.activity_level,
            goal=body.goal,
        )
    )
    return {"targets": targets_to_dict(targets)}
