"""Home screen statistics."""

import uuid

from fastapi import APIRouter, Depends

from fitmaster.api.deps import get_current_user, get_exercise_repo, get_workout_repo
from fitmaster.repositories import ExerciseRepository, WorkoutRepository
from fitmaster.schemas.stats import StatsRead
from fitmaster.services.stats import compute_stats

router = APIRouter()


@router.get("", response_model=StatsRead)
async def get_stats(
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
    workouts: WorkoutRepository = Depends(get_workout_repo),
):
    """Exercise/workout totals and workouts created in the last 7 days."""
    counts = await exercises.count_by_muscle_group(user_id)
    history = await workouts.list(user_id)
    return compute_stats(sum(counts.values()), history)
