"""Workout record endpoints (history, rename, delete)."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query

from fitmaster.api.deps import get_current_user, get_workout_repo
from fitmaster.core.enums import WorkoutStatus
from fitmaster.repositories import WorkoutRepository
from fitmaster.schemas.workout import WorkoutRead, WorkoutUpdate

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    user_id: uuid.UUID = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repo),
    status: WorkoutStatus | None = None,
    limit: int | None = Query(None, ge=1, le=500),
):
    """List workouts, newest first, optionally by status."""
    return await workouts.list(user_id, status=status, limit=limit)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repo),
):
    workout = await workouts.get(user_id, workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.patch("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    user_id: uuid.UUID = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repo),
):
    """Update workout (name, status, exercises)."""
    workout = await workouts.update(user_id, workout_id, payload)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user),
    workouts: WorkoutRepository = Depends(get_workout_repo),
):
    if not await workouts.delete(user_id, workout_id):
        raise HTTPException(status_code=404, detail="Workout not found")
    return None
