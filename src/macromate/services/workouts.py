"""Workout plan generation and storage."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from macromate.domain.workouts import WorkoutPlan, WorkoutPlanDraft, WorkoutRequest
from macromate.services.ai import CompletionClient
from macromate.services.errors import NotFoundError
from macromate.services.parsing import normalize_workout

_logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workout plans."""

    def create_plan(
        self, user_id: UUID, draft: WorkoutPlanDraft, generated_at: datetime
    ) -> WorkoutPlan:
        """Store a generated plan and return it."""

    def list_plans(self, user_id: UUID, limit: int) -> list[WorkoutPlan]:
        """Return the user's plans, newest first."""

    def get_plan(self, plan_id: UUID) -> WorkoutPlan | None:
        """Return a plan by id."""

    def mark_completed(self, plan_id: UUID, completed_at: datetime) -> None:
        """Stamp a plan as completed."""


def build_workout_prompts(request: WorkoutRequest) -> tuple[str, str]:
    """Return the system and user prompts for a workout request."""
    system_prompt = f"""You are a certified personal trainer. \
Create safe, effective workout plans.

IMPORTANT: Return ONLY valid JSON with this exact structure:
{{
  "title": "Workout title",
  "description": "Brief description",
  "duration_minutes": <number>,
  "difficulty": "{request.fitness_level}",
  "equipment": [<array of equipment needed>],
  "exercises": [
    {{
      "name": "Exercise name",
      "sets": <number>,
      "reps": "8-12" or "30 seconds",
      "rest": "60 seconds",
      "notes": "Optional form tips"
    }}
  ],
  "safety_notes": ["Important safety considerations"]
}}

Guidelines:
- Include warm-up and cool-down
- Provide beginner modifications in notes when appropriate
- Prioritize compound movements
- Balance push/pull/legs
- Include rest periods"""

    equipment = (
        ", ".join(request.equipment)
        if request.equipment
        else "no equipment (bodyweight only)"
    )
    focus = (
        f"Focus area: {request.focus_area}"
        if request.focus_area and request.focus_area != "full"
        else "Full body workout"
    )
    user_prompt = (
        f"Create a {request.duration}-minute {request.fitness_level} workout "
        f"for someone whose goal is to {request.goal}.\n"
        f"Available equipment: {equipment}.\n"
        f"{focus}"
    )
    return system_prompt, user_prompt


@dataclass
class WorkoutService:
    """Service that generates workout plans with the LLM and stores them."""

    client: CompletionClient
    repository: WorkoutRepository
    model: str
    temperature: float = 0.7

    async def generate(self, user_id: UUID, request: WorkoutRequest) -> WorkoutPlan:
        """Generate, sanitize and persist a workout plan."""
        system_prompt, user_prompt = build_workout_prompts(request)
        content = await self.client.complete(
            model=self.model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            temperature=self.temperature,
        )
        draft = normalize_workout(content)
        _logger.info("Generated workout: %s", draft.title)
        return self.repository.create_plan(
            user_id, draft, generated_at=datetime.now(tz=UTC)
        )

    def list_recent(self, user_id: UUID, limit: int = 10) -> list[WorkoutPlan]:
        """Return the most recent plans for a user."""
        return self.repository.list_plans(user_id, limit)

    def mark_completed(self, user_id: UUID, plan_id: UUID) -> WorkoutPlan:
        """Mark a user's plan as completed and return the updated plan."""
        plan = self.repository.get_plan(plan_id)
        if plan is None or plan.user_id != user_id:
            raise NotFoundError("Workout plan not found")
        self.repository.mark_completed(plan_id, datetime.now(tz=UTC))
        updated = self.repository.get_plan(plan_id)
        if updated is None:
            raise NotFoundError("Workout plan not found")
        return updated
