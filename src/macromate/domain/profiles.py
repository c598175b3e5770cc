"""Domain models for user profiles."""

from dataclasses import dataclass, field
from uuid import UUID

from macromate.domain.targets import BodyProfile, DailyTargets


@dataclass(frozen=True)
class Profile:
    """User profile with body stats and daily targets."""

    user_id: UUID
    email: str | None
    display_name: str | None
    height_cm: float | None
    weight_kg: float | None
    goal: str | None
    activity_level: str | None
    targets: DailyTargets
    dietary_preferences: list[str] = field(default_factory=list)
    onboarding_completed: bool = False

    def body_profile(self) -> BodyProfile:
        """Return the inputs used for target calculation."""
        return BodyProfile(
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            activity_level=self.activity_level,
            goal=self.goal,
        )
