"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from macromate.domain.profiles import Profile
from macromate.domain.targets import DEFAULT_TARGETS, DailyTargets
from macromate.services.profiles import ProfileRepository

_PROFILE_COLUMNS = (
    "user_id, email, display_name, height_cm, weight_kg, goal, activity_level, "
    "dietary_preferences, daily_calories, daily_protein, daily_carbs, daily_fat, "
    "onboarding_completed"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile row for a user."""
        response = (
            self.client.table("profiles")
            .select(_PROFILE_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(self, user_id: UUID, fields: dict[str, object]) -> Profile:
        """Update profile columns and return the updated row."""
        payload = dict(fields)
        payload["updated_at"] = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("profiles")
            .update(payload)
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> Profile:
    return Profile(
        user_id=UUID(str(row["user_id"])),
        email=row.get("email"),
        display_name=row.get("display_name"),
        height_cm=_optional_float(row.get("height_cm")),
        weight_kg=_optional_float(row.get("weight_kg")),
        goal=row.get("goal"),
        activity_level=row.get("activity_level"),
        targets=DailyTargets(
            calories=_target(row, "daily_calories", DEFAULT_TARGETS.calories),
            protein_g=_target(row, "daily_protein", DEFAULT_TARGETS.protein_g),
            carbs_g=_target(row, "daily_carbs", DEFAULT_TARGETS.carbs_g),
            fat_g=_target(row, "daily_fat", DEFAULT_TARGETS.fat_g),
        ),
        dietary_preferences=list(row.get("dietary_preferences") or []),
        onboarding_completed=bool(row.get("onboarding_completed", False)),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return float(value)
    return None


def _target(row: dict[str, object], column: str, default: int) -> int:
    value = row.get(column)
    return default if value is None else int(value)
