"""SQLAlchemy implementation of the exercise catalog."""

from __future__ import annotations

import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitmaster.core.enums import LoadType, MuscleGroup
from fitmaster.models.exercise import Exercise
from fitmaster.repositories.base import store_errors
from fitmaster.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate


class SqlExerciseRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def _get_row(self, user_id: uuid.UUID, exercise_id: uuid.UUID) -> Exercise | None:
        result = await self._db.execute(
            select(Exercise).where(Exercise.id == exercise_id, Exercise.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list(
        self,
        user_id: uuid.UUID,
        *,
        muscle_group: MuscleGroup | None = None,
        load_type: LoadType | None = None,
        search: str | None = None,
    ) -> list[ExerciseRead]:
        stmt = select(Exercise).where(Exercise.user_id == user_id)
        if muscle_group:
            stmt = stmt.where(Exercise.muscle_group == muscle_group)
        if load_type:
            stmt = stmt.where(Exercise.load_type == load_type)
        if search:
            stmt = stmt.where(func.lower(Exercise.name).contains(search.lower(), autoescape=True))
        stmt = stmt.order_by(Exercise.created_at.desc())
        with store_errors("list exercises"):
            result = await self._db.execute(stmt)
        return [ExerciseRead.model_validate(e) for e in result.scalars().all()]

    async def get(self, user_id: uuid.UUID, exercise_id: uuid.UUID) -> ExerciseRead | None:
        with store_errors("load exercise"):
            exercise = await self._get_row(user_id, exercise_id)
        return ExerciseRead.model_validate(exercise) if exercise else None

    async def get_many(
        self, user_id: uuid.UUID, exercise_ids: list[uuid.UUID]
    ) -> dict[uuid.UUID, ExerciseRead]:
        if not exercise_ids:
            return {}
        with store_errors("load exercises"):
            result = await self._db.execute(
                select(Exercise).where(
                    Exercise.user_id == user_id, Exercise.id.in_(set(exercise_ids))
                )
            )
        return {e.id: ExerciseRead.model_validate(e) for e in result.scalars().all()}

    async def create(self, user_id: uuid.UUID, data: ExerciseCreate) -> ExerciseRead:
        exercise = Exercise(user_id=user_id, **data.model_dump())
        with store_errors("create exercise"):
            self._db.add(exercise)
            await self._db.flush()
            await self._db.refresh(exercise)
        return ExerciseRead.model_validate(exercise)

    async def update(
        self, user_id: uuid.UUID, exercise_id: uuid.UUID, patch: ExerciseUpdate
    ) -> ExerciseRead | None:
        with store_errors("update exercise"):
            exercise = await self._get_row(user_id, exercise_id)
            if not exercise:
                return None
            for k, v in patch.model_dump(exclude_unset=True).items():
                setattr(exercise, k, v)
            await self._db.flush()
            await self._db.refresh(exercise)
        return ExerciseRead.model_validate(exercise)

    async def delete(self, user_id: uuid.UUID, exercise_id: uuid.UUID) -> bool:
        with store_errors("delete exercise"):
            exercise = await self._get_row(user_id, exercise_id)
            if not exercise:
                return False
            await self._db.delete(exercise)
            await self._db.flush()
        return True

    async def count_by_muscle_group(self, user_id: uuid.UUID) -> dict[MuscleGroup, int]:
        with store_errors("count exercises"):
            result = await self._db.execute(
                select(Exercise.muscle_group, func.count(Exercise.id))
                .where(Exercise.user_id == user_id)
                .group_by(Exercise.muscle_group)
            )
        return {group: int(n) for group, n in result.all()}
