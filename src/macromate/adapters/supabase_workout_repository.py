"""Supabase repository for workout plans."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macromate.domain.workouts import Exercise, WorkoutPlan, WorkoutPlanDraft
from macromate.services.workouts import WorkoutRepository

_PLAN_COLUMNS = (
    "id, user_id, title, description, duration_minutes, difficulty, equipment, "
    "exercises, safety_notes, generated_at, completed_at"
)


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workout plans."""

    client: Client

    def create_plan(
        self, user_id: UUID, draft: WorkoutPlanDraft, generated_at: datetime
    ) -> WorkoutPlan:
        """Insert a workout plan row and return it."""
        response = (
            self.client.table("workout_plans")
            .insert(
                {
                    "user_id": str(user_id),
                    "title": draft.title,
                    "description": draft.description,
                    "duration_minutes": draft.duration_minutes,
                    "difficulty": draft.difficulty,
                    "equipment": draft.equipment,
                    "exercises": [
                        exercise.model_dump(exclude_none=True)
                        for exercise in draft.exercises
                    ],
                    "safety_notes": draft.safety_notes,
                    "generated_at": generated_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create workout plan")
        return _parse_plan(response.data[0])

    def list_plans(self, user_id: UUID, limit: int) -> list[WorkoutPlan]:
        """Return a user's plans, newest first."""
        response = (
            self.client.table("workout_plans")
            .select(_PLAN_COLUMNS)
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def get_plan(self, plan_id: UUID) -> WorkoutPlan | None:
        """Return a plan by id."""
        response = (
            self.client.table("workout_plans")
            .select(_PLAN_COLUMNS)
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def mark_completed(self, plan_id: UUID, completed_at: datetime) -> None:
        """Set the completion timestamp for a plan."""
        self.client.table("workout_plans").update(
            {"completed_at": completed_at.isoformat()}
        ).eq("id", str(plan_id)).execute()


def _parse_plan(row: dict[str, object]) -> WorkoutPlan:
    exercises_raw = row.get("exercises")
    completed_raw = row.get("completed_at")
    return WorkoutPlan(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title") or ""),
        description=row.get("description"),
        duration_minutes=row.get("duration_minutes"),
        difficulty=row.get("difficulty"),
        equipment=list(row.get("equipment") or []),
        exercises=[
            Exercise.model_validate(item)
            for item in (exercises_raw if isinstance(exercises_raw, list) else [])
        ],
        safety_notes=list(row.get("safety_notes") or []),
        generated_at=datetime.fromisoformat(str(row["generated_at"])),
        completed_at=(
            datetime.fromisoformat(completed_raw)
            if isinstance(completed_raw, str) and completed_raw
            else None
        ),
    )
