"""Exercise schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fitmaster.core.constants import MAX_REPS, MAX_SETS, MIN_REPS, MIN_SETS
from fitmaster.core.enums import ExerciseType, LoadType, MuscleGroup


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    muscle_group: MuscleGroup
    load_type: LoadType
    exercise_type: ExerciseType
    sets: int = Field(default=3, ge=MIN_SETS, le=MAX_SETS)
    reps: int = Field(default=10, ge=MIN_REPS, le=MAX_REPS)
    technique: str = ""
    video_url: str | None = Field(None, max_length=1000)
    machine_name: str | None = Field(None, max_length=255)
    machine_settings: str | None = Field(None, max_length=1000)
    comment: str | None = None
    last_weight: float | None = Field(None, ge=0)


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    muscle_group: MuscleGroup | None = None
    load_type: LoadType | None = None
    exercise_type: ExerciseType | None = None
    sets: int | None = Field(None, ge=MIN_SETS, le=MAX_SETS)
    reps: int | None = Field(None, ge=MIN_REPS, le=MAX_REPS)
    technique: str | None = None
    video_url: str | None = Field(None, max_length=1000)
    machine_name: str | None = Field(None, max_length=255)
    machine_settings: str | None = Field(None, max_length=1000)
    comment: str | None = None
    last_weight: float | None = Field(None, ge=0)


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    user_id: UUID
    created_at: datetime | None = None
    updated_at: datetime | None = None
