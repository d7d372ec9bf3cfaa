"""SQLAlchemy implementation of the workout record store."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitmaster.core.enums import WorkoutStatus
from fitmaster.models.workout import Workout
from fitmaster.repositories.base import store_errors
from fitmaster.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate


class SqlWorkoutRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def _get_row(self, user_id: uuid.UUID, workout_id: uuid.UUID) -> Workout | None:
        result = await self._db.execute(
            select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list(
        self,
        user_id: uuid.UUID,
        *,
        status: WorkoutStatus | None = None,
        limit: int | None = None,
    ) -> list[WorkoutRead]:
        stmt = select(Workout).where(Workout.user_id == user_id)
        if status:
            stmt = stmt.where(Workout.status == status)
        stmt = stmt.order_by(Workout.created_at.desc())
        if limit:
            stmt = stmt.limit(limit)
        with store_errors("list workouts"):
            result = await self._db.execute(stmt)
        return [WorkoutRead.model_validate(w) for w in result.scalars().all()]

    async def get(self, user_id: uuid.UUID, workout_id: uuid.UUID) -> WorkoutRead | None:
        with store_errors("load workout"):
            workout = await self._get_row(user_id, workout_id)
        return WorkoutRead.model_validate(workout) if workout else None

    async def create(self, user_id: uuid.UUID, data: WorkoutCreate) -> WorkoutRead:
        workout = Workout(
            user_id=user_id,
            name=data.name,
            status=data.status,
            # JSON column: UUIDs must be stored as strings
            exercises=[e.model_dump(mode="json") for e in data.exercises],
        )
        with store_errors("create workout"):
            self._db.add(workout)
            await self._db.flush()
            await self._db.refresh(workout)
        return WorkoutRead.model_validate(workout)

    async def update(
        self, user_id: uuid.UUID, workout_id: uuid.UUID, patch: WorkoutUpdate
    ) -> WorkoutRead | None:
        data = patch.model_dump(exclude_unset=True)
        if patch.exercises is not None:
            data["exercises"] = [e.model_dump(mode="json") for e in patch.exercises]
        with store_errors("update workout"):
            workout = await self._get_row(user_id, workout_id)
            if not workout:
                return None
            for k, v in data.items():
                setattr(workout, k, v)
            await self._db.flush()
            await self._db.refresh(workout)
        return WorkoutRead.model_validate(workout)

    async def delete(self, user_id: uuid.UUID, workout_id: uuid.UUID) -> bool:
        with store_errors("delete workout"):
            workout = await self._get_row(user_id, workout_id)
            if not workout:
                return False
            await self._db.delete(workout)
            await self._db.flush()
        return True
