"""
Repository interfaces (ports) for the exercise catalog, workout records and users.

The generator and session services only see these protocols; the SQLAlchemy
implementations live beside this module and tests substitute in-memory fakes.
Every method is scoped to the owning user id.
"""

from __future__ import annotations

import uuid
from typing import Protocol

from fitmaster.core.enums import LoadType, MuscleGroup, WorkoutStatus
from fitmaster.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate
from fitmaster.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate


class ExerciseRepository(Protocol):
    """Exercise catalog."""

    async def list(
        self,
        user_id: uuid.UUID,
        *,
        muscle_group: MuscleGroup | None = None,
        load_type: LoadType | None = None,
        search: str | None = None,
    ) -> list[ExerciseRead]:
        """Exercises of the user, newest first, optionally filtered."""
        ...

    async def get(self, user_id: uuid.UUID, exercise_id: uuid.UUID) -> ExerciseRead | None:
        ...

    async def get_many(
        self, user_id: uuid.UUID, exercise_ids: list[uuid.UUID]
    ) -> dict[uuid.UUID, ExerciseRead]:
        """Look up several exercises at once; unknown ids are absent from the result."""
        ...

    async def create(self, user_id: uuid.UUID, data: ExerciseCreate) -> ExerciseRead:
        ...

    async def update(
        self, user_id: uuid.UUID, exercise_id: uuid.UUID, patch: ExerciseUpdate
    ) -> ExerciseRead | None:
        """Apply the fields set on `patch`; None when the exercise does not exist."""
        ...

    async def delete(self, user_id: uuid.UUID, exercise_id: uuid.UUID) -> bool:
        ...

    async def count_by_muscle_group(self, user_id: uuid.UUID) -> dict[MuscleGroup, int]:
        ...


class WorkoutRepository(Protocol):
    """Workout records."""

    async def list(
        self,
        user_id: uuid.UUID,
        *,
        status: WorkoutStatus | None = None,
        limit: int | None = None,
    ) -> list[WorkoutRead]:
        """Workouts of the user, newest first."""
        ...

    async def get(self, user_id: uuid.UUID, workout_id: uuid.UUID) -> WorkoutRead | None:
        ...

    async def create(self, user_id: uuid.UUID, data: WorkoutCreate) -> WorkoutRead:
        ...

    async def update(
        self, user_id: uuid.UUID, workout_id: uuid.UUID, patch: WorkoutUpdate
    ) -> WorkoutRead | None:
        ...

    async def delete(self, user_id: uuid.UUID, workout_id: uuid.UUID) -> bool:
        ...


class UserRepository(Protocol):
    async def get_by_email(self, email: str) -> tuple[uuid.UUID, str] | None:
        """(user id, password hash) for the email, or None."""
        ...

    async def get(self, user_id: uuid.UUID):
        ...

    async def create(self, email: str, password_hash: str):
        ...
