"""Workout generator request/response schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from fitmaster.core.enums import MuscleGroup
from fitmaster.schemas.exercise import ExerciseRead


class SelectionEntry(BaseModel):
    """One selected muscle group.

    exercise_count is clamped by the selection model; left out, the configured
    default count applies.
    """

    muscle_group: MuscleGroup
    exercise_count: int | None = None


class MuscleGroupAvailability(BaseModel):
    muscle_group: MuscleGroup
    exercise_count: int
    selectable: bool


class GeneratedExercise(ExerciseRead):
    """Exercise picked by the generator; lives only until the workout is started."""

    is_replaced: bool = False


class GeneratedRef(BaseModel):
    """Client-side handle on a generated exercise (the catalog is re-read server-side)."""

    exercise_id: UUID
    is_replaced: bool = False


class GenerateRequest(BaseModel):
    selections: list[SelectionEntry] = Field(..., min_length=1)


class GenerateResponse(BaseModel):
    selections: list[SelectionEntry]
    exercises: list[GeneratedExercise]


class ReplaceRequest(BaseModel):
    workout: list[GeneratedRef] = Field(..., min_length=1)
    exercise_id: UUID


class ReplaceResponse(BaseModel):
    exercises: list[GeneratedExercise]
    replaced: bool


class StartWorkoutRequest(BaseModel):
    exercises: list[GeneratedRef] = Field(..., min_length=1)
    name: str | None = Field(None, min_length=1, max_length=255)
