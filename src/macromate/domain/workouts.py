"""Models for AI-generated workout plans."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

FitnessLevel = Literal["beginner", "intermediate", "advanced"]
FITNESS_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")


class WorkoutRequest(BaseModel):
    """Parameters for generating a workout plan."""

    goal: str = "build muscle"
    duration: int = Field(default=30, ge=5, le=180)
    fitness_level: FitnessLevel = "intermediate"
    equipment: list[str] = Field(default_factory=list)
    focus_area: str | None = None


class Exercise(BaseModel):
    """Single exercise in a workout plan."""

    name: str
    sets: int = Field(ge=1)
    reps: str
    rest: str
    notes: str | None = None


class WorkoutPlanDraft(BaseModel):
    """Sanitized workout plan returned by the LLM, before persistence."""

    title: str
    description: str | None = None
    duration_minutes: int | None = Field(default=None, ge=0)
    difficulty: FitnessLevel | None = None
    equipment: list[str] = Field(default_factory=list)
    exercises: list[Exercise] = Field(default_factory=list)
    safety_notes: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class WorkoutPlan:
    """Workout plan stored for a user."""

    id: UUID
    user_id: UUID
    title: str
    description: str | None
    duration_minutes: int | None
    difficulty: str | None
    equipment: list[str]
    exercises: list[Exercise]
    safety_notes: list[str]
    generated_at: datetime
    completed_at: datetime | None = None
