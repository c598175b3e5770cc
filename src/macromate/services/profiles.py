"""Profile management and daily target updates."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from macromate.domain.profiles import Profile
from macromate.domain.targets import ACTIVITY_LEVELS, GOALS, BodyProfile, DailyTargets
from macromate.numbers import to_positive_float
from macromate.services.errors import NotFoundError
from macromate.services.targets import compute_daily_targets

_logger = logging.getLogger(__name__)

_BODY_FIELDS = ("height_cm", "weight_kg", "goal", "activity_level")
_TARGET_FIELDS = ("daily_calories", "daily_protein", "daily_carbs", "daily_fat")


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""

    def update_profile(self, user_id: UUID, fields: dict[str, object]) -> Profile:
        """Update profile columns and return the stored profile."""


@dataclass
class ProfileService:
    """Service for onboarding and profile edits."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> Profile:
        """Return a user's profile or raise NotFoundError."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def complete_onboarding(  # noqa: PLR0913
        self,
        user_id: UUID,
        *,
        goal: str,
        activity_level: str,
        height_cm: float | None,
        weight_kg: float | None,
        dietary_preferences: list[str] | None = None,
    ) -> Profile:
        """Store onboarding answers together with freshly computed targets."""
        _check_choice("goal", goal, GOALS)
        _check_choice("activity_level", activity_level, ACTIVITY_LEVELS)
        self.get_profile(user_id)
        height = to_positive_float(height_cm)
        weight = to_positive_float(weight_kg)
        targets = compute_daily_targets(
            BodyProfile(
                height_cm=height,
                weight_kg=weight,
                activity_level=activity_level,
                goal=goal,
            )
        )
        fields: dict[str, object] = {
            "goal": goal,
            "activity_level": activity_level,
            "height_cm": height,
            "weight_kg": weight,
            "dietary_preferences": dietary_preferences or None,
            "onboarding_completed": True,
            **_target_columns(targets),
        }
        _logger.info(
            "Onboarding completed: user_id=%s calories=%s", user_id, targets.calories
        )
        return self.repository.update_profile(user_id, fields)

    def update_profile(self, user_id: UUID, changes: dict[str, object]) -> Profile:
        """Apply profile edits, recomputing targets when body stats change.

        Explicit target values in ``changes`` take precedence over the
        recomputed ones.
        """
        current = self.get_profile(user_id)
        fields: dict[str, object] = {}
        if "display_name" in changes:
            fields["display_name"] = changes["display_name"] or None
        for key in ("height_cm", "weight_kg"):
            if key in changes:
                fields[key] = to_positive_float(changes[key])
        for key, choices in (("goal", GOALS), ("activity_level", ACTIVITY_LEVELS)):
            if key in changes:
                value = changes[key] or None
                if value is not None:
                    _check_choice(key, value, choices)
                fields[key] = value

        if any(key in fields for key in _BODY_FIELDS):
            body = replace(
                current.body_profile(),
                **{key: fields[key] for key in _BODY_FIELDS if key in fields},
            )
            fields.update(_target_columns(compute_daily_targets(body)))

        for key in _TARGET_FIELDS:
            value = changes.get(key)
            if isinstance(value, int) and not isinstance(value, bool) and value > 0:
                fields[key] = value

        if not fields:
            return current
        return self.repository.update_profile(user_id, fields)


def _check_choice(field: str, value: object, choices: tuple[str, ...]) -> None:
    if value not in choices:
        raise ValueError(f"Invalid {field}: {value}")


def _target_columns(targets: DailyTargets) -> dict[str, object]:
    return {
        "daily_calories": targets.calories,
        "daily_protein": targets.protein_g,
        "daily_carbs": targets.carbs_g,
        "daily_fat": targets.fat_g,
    }
