"""Tests for profile service."""

from uuid import uuid4

import pytest

from macromate.domain.targets import DailyTargets
from macromate.services.errors import NotFoundError
from macromate.services.profiles import ProfileService
from tests.conftest import InMemoryProfileRepository


def test_complete_onboarding_stores_computed_targets() -> None:
    repository = InMemoryProfileRepository()
    user_id = uuid4()
    repository.add(user_id)
    service = ProfileService(repository)

    profile = service.complete_onboarding(
        user_id,
        goal="maintain",
        activity_level="moderate",
        height_cm=170,
        weight_kg=70,
        dietary_preferences=["Vegetarian"],
    )

    assert profile.onboarding_completed
    assert profile.targets == DailyTargets(
        calories=2507, protein_g=140, carbs_g=329, fat_g=70
    )
    assert profile.dietary_preferences == ["Vegetarian"]


def test_complete_onboarding_stores_invalid_stats_as_null() -> None:
    repository = InMemoryProfileRepository()
    user_id = uuid4()
    repository.add(user_id)
    service = ProfileService(repository)

    profile = service.complete_onboarding(
        user_id, goal="lose", activity_level="light", height_cm=0, weight_kg=None
    )

    assert profile.height_cm is None
    assert profile.weight_kg is None
    assert repository.updates[0]["dietary_preferences"] is None
    # defaults 170 cm / 70 kg: 1617.5 * 1.375 - 500
    assert profile.targets.calories == 1724


def test_complete_onboarding_requires_profile() -> None:
    service = ProfileService(InMemoryProfileRepository())

    with pytest.raises(NotFoundError):
        service.complete_onboarding(
            uuid4(), goal="lose", activity_level="light", height_cm=180, weight_kg=80
        )


def test_update_profile_recomputes_targets_on_weight_change() -> None:
    repository = InMemoryProfileRepository()
    user_id = uuid4()
    repository.add(
        user_id,
        height_cm=170.0,
        weight_kg=70.0,
        goal="maintain",
        activity_level="moderate",
    )
    service = ProfileService(repository)

    profile = service.update_profile(user_id, {"weight_kg": 80})

    assert profile.weight_kg == 80
    assert profile.targets.protein_g == 160
    # (800 + 1062.5 - 145) * 1.55
    assert profile.targets.calories == 2662


def test_update_profile_explicit_targets_win() -> None:
    repository = InMemoryProfileRepository()
    user_id = uuid4()
    repository.add(user_id, height_cm=170.0, weight_kg=70.0)
    service = ProfileService(repository)

    profile = service.update_profile(
        user_id, {"goal": "gain", "daily_calories": 3000, "daily_protein": 180}
    )

    assert profile.goal == "gain"
    assert profile.targets.calories == 3000
    assert profile.targets.protein_g == 180
    assert profile.targets.fat_g == 78


def test_update_profile_display_name_only_keeps_targets() -> None:
    repository = InMemoryProfileRepository()
    user_id = uuid4()
    original = repository.add(user_id)
    service = ProfileService(repository)

    profile = service.update_profile(user_id, {"display_name": "Sam"})

    assert profile.display_name == "Sam"
    assert profile.targets == original.targets
    assert "daily_calories" not in repository.updates[0]


def test_update_profile_without_changes_skips_write() -> None:
    repository = InMemoryProfileRepository()
    user_id = uuid4()
    repository.add(user_id)
    service = ProfileService(repository)

    service.update_profile(user_id, {})

    assert repository.updates == []


def test_complete_onboarding_rejects_unknown_activity_level() -> None:
    repository = InMemoryProfileRepository()
    user_id = uuid4()
    repository.add(user_id)
    service = ProfileService(repository)

    with pytest.raises(ValueError, match="Invalid activity_level"):
        service.complete_onboarding(
            user_id, goal="lose", activity_level="couch", height_cm=180, weight_kg=80
        )
    assert repository.updates == []


def test_update_profile_rejects_unknown_goal() -> None:
    repository = InMemoryProfileRepository()
    user_id = uuid4()
    repository.add(user_id)

    with pytest.raises(ValueError, match="Invalid goal"):
        ProfileService(repository).update_profile(user_id, {"goal": "bulk"})
