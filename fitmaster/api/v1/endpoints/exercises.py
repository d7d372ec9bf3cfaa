"""Exercise CRUD endpoints (the user's catalog)."""

import uuid

from fastapi import APIRouter, Depends, HTTPException

from fitmaster.api.deps import get_current_user, get_exercise_repo
from fitmaster.core.enums import LoadType, MuscleGroup
from fitmaster.repositories import ExerciseRepository
from fitmaster.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
    muscle_group: MuscleGroup | None = None,
    load_type: LoadType | None = None,
    search: str | None = None,
):
    """List exercises, newest first; filter by muscle group, load type or name substring."""
    return await exercises.list(
        user_id, muscle_group=muscle_group, load_type=load_type, search=search
    )


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
):
    """Create a new exercise."""
    return await exercises.create(user_id, payload)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
):
    exercise = await exercises.get(user_id, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
):
    """Update an exercise (partial)."""
    exercise = await exercises.update(user_id, exercise_id, payload)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
):
    if not await exercises.delete(user_id, exercise_id):
        raise HTTPException(status_code=404, detail="Exercise not found")
    return None
