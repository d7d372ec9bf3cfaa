"""Workout generator: muscle group availability, generate, replace, start."""

from __future__ import annotations

import uuid
from collections import Counter

from fastapi import APIRouter, Depends

from fitmaster.api.deps import get_current_user, get_exercise_repo, get_generator, get_workout_repo
from fitmaster.core.config import Settings, get_settings
from fitmaster.repositories import ExerciseRepository, WorkoutRepository
from fitmaster.schemas.generator import (
    GenerateRequest,
    GenerateResponse,
    MuscleGroupAvailability,
    ReplaceRequest,
    ReplaceResponse,
    StartWorkoutRequest,
)
from fitmaster.schemas.workout import WorkoutRead
from fitmaster.services.generator import WorkoutGenerator, hydrate, start_workout
from fitmaster.services.selection import SelectionModel

router = APIRouter()


def _selection_limits(settings: Settings) -> dict[str, int]:
    return {
        "default_count": settings.default_exercise_count,
        "min_count": settings.min_exercise_count,
        "max_count": settings.max_exercise_count,
    }


@router.get("/muscle-groups", response_model=list[MuscleGroupAvailability])
async def muscle_group_availability(
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
    settings: Settings = Depends(get_settings),
):
    """Every muscle group with its exercise count; groups without exercises are not selectable."""
    counts = await exercises.count_by_muscle_group(user_id)
    return SelectionModel(counts, **_selection_limits(settings)).availability()


@router.post("/generate", response_model=GenerateResponse)
async def generate_workout(
    payload: GenerateRequest,
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
    generator: WorkoutGenerator = Depends(get_generator),
    settings: Settings = Depends(get_settings),
):
    """Generate exercises for the selected muscle groups.

    Unselectable groups are dropped and counts clamped exactly as the
    selection model does when the user picks them.
    """
    catalog = await exercises.list(user_id)
    counts = Counter(e.muscle_group for e in catalog)
    selection = SelectionModel.from_entries(payload.selections, counts, **_selection_limits(settings))
    entries = selection.entries
    return GenerateResponse(selections=entries, exercises=generator.generate(catalog, entries))


@router.post("/replace", response_model=ReplaceResponse)
async def replace_exercise(
    payload: ReplaceRequest,
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
    generator: WorkoutGenerator = Depends(get_generator),
):
    """Swap one generated exercise; `replaced` is false when no candidate exists."""
    catalog = await exercises.list(user_id)
    current = hydrate(catalog, payload.workout)
    updated, replaced = generator.replace(catalog, current, payload.exercise_id)
    return ReplaceResponse(exercises=updated, replaced=replaced)


@router.post("/start", response_model=WorkoutRead, status_code=201)
async def start_generated_workout(
    payload: StartWorkoutRequest,
    user_id: uuid.UUID = Depends(get_current_user),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
    workouts: WorkoutRepository = Depends(get_workout_repo),
):
    """Save the generated list as a new active workout."""
    found = await exercises.get_many(user_id, [ref.exercise_id for ref in payload.exercises])
    generated = hydrate(list(found.values()), payload.exercises)
    return await start_workout(workouts, user_id, generated, name=payload.name)
