"""Workout and embedded WorkoutExercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fitmaster.core.enums import WorkoutStatus


class WorkoutExercise(BaseModel):
    """Snapshot of one exercise inside a workout (not addressable on its own)."""

    exercise_id: UUID
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    weight: float = Field(default=0, ge=0)
    completed: bool = False


class WorkoutCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    status: WorkoutStatus = WorkoutStatus.ACTIVE
    exercises: list[WorkoutExercise] = []


class WorkoutUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    status: WorkoutStatus | None = None
    exercises: list[WorkoutExercise] | None = None
    completed_at: datetime | None = None


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    name: str
    status: WorkoutStatus
    exercises: list[WorkoutExercise] = []
    created_at: datetime
    updated_at: datetime | None = None
    completed_at: datetime | None = None
