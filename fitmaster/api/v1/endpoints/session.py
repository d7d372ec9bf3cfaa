"""Live workout session: sets, navigation, rest timer and finishing."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from fitmaster.api.deps import (
    get_current_user,
    get_exercise_repo,
    get_session_registry,
    get_workout_repo,
    new_active_session,
)
from fitmaster.db.session import get_db
from fitmaster.repositories import ExerciseRepository, WorkoutRepository
from fitmaster.repositories.base import store_errors
from fitmaster.schemas.session import SessionRead, SetWeightUpdate, TimerDurationUpdate
from fitmaster.schemas.workout import WorkoutRead
from fitmaster.services.session import ActiveSession
from fitmaster.services.session_registry import SessionRegistry

router = APIRouter()


def _current(
    user_id: uuid.UUID = Depends(get_current_user),
    registry: SessionRegistry = Depends(get_session_registry),
) -> ActiveSession:
    return registry.get(user_id)


@router.post("", response_model=SessionRead)
async def open_session(
    user_id: uuid.UUID = Depends(get_current_user),
    registry: SessionRegistry = Depends(get_session_registry),
    session: ActiveSession = Depends(new_active_session),
    exercises: ExerciseRepository = Depends(get_exercise_repo),
    workouts: WorkoutRepository = Depends(get_workout_repo),
):
    """Load the most recent active workout. State `empty` means: go to the generator."""
    await registry.open(user_id, session, exercises, workouts)
    return SessionRead.from_session(session)


@router.get("", response_model=SessionRead)
async def get_session(session: ActiveSession = Depends(_current)):
    return SessionRead.from_session(session)


@router.delete("", status_code=204)
async def close_session(
    user_id: uuid.UUID = Depends(get_current_user),
    registry: SessionRegistry = Depends(get_session_registry),
):
    registry.close(user_id)
    return None


@router.put("/exercises/{exercise_index}/sets/{set_index}/weight", response_model=SessionRead)
async def update_set_weight(
    exercise_index: int,
    set_index: int,
    payload: SetWeightUpdate,
    session: ActiveSession = Depends(_current),
):
    session.update_set_weight(exercise_index, set_index, payload.weight)
    return SessionRead.from_session(session)


@router.post("/exercises/{exercise_index}/sets/{set_index}/complete", response_model=SessionRead)
async def complete_set(
    exercise_index: int,
    set_index: int,
    session: ActiveSession = Depends(_current),
):
    """Mark a set done; starts the rest timer unless it was the exercise's last set."""
    session.complete_set(exercise_index, set_index)
    return SessionRead.from_session(session)


@router.post("/exercises/{exercise_index}/sets/{set_index}/uncomplete", response_model=SessionRead)
async def uncomplete_set(
    exercise_index: int,
    set_index: int,
    session: ActiveSession = Depends(_current),
):
    session.uncomplete_set(exercise_index, set_index)
    return SessionRead.from_session(session)


@router.post("/next", response_model=SessionRead)
async def next_exercise(session: ActiveSession = Depends(_current)):
    session.next_exercise()
    return SessionRead.from_session(session)


@router.post("/previous", response_model=SessionRead)
async def previous_exercise(session: ActiveSession = Depends(_current)):
    session.previous_exercise()
    return SessionRead.from_session(session)


@router.post("/exercises/{exercise_index}/select", response_model=SessionRead)
async def select_exercise(exercise_index: int, session: ActiveSession = Depends(_current)):
    session.select_exercise(exercise_index)
    return SessionRead.from_session(session)


@router.post("/timer/start", response_model=SessionRead)
async def start_timer(session: ActiveSession = Depends(_current)):
    session.start_timer()
    return SessionRead.from_session(session)


@router.post("/timer/pause", response_model=SessionRead)
async def pause_timer(session: ActiveSession = Depends(_current)):
    session.pause_timer()
    return SessionRead.from_session(session)


@router.post("/timer/resume", response_model=SessionRead)
async def resume_timer(session: ActiveSession = Depends(_current)):
    session.resume_timer()
    return SessionRead.from_session(session)


@router.post("/timer/reset", response_model=SessionRead)
async def reset_timer(session: ActiveSession = Depends(_current)):
    session.reset_timer()
    return SessionRead.from_session(session)


@router.put("/timer/duration", response_model=SessionRead)
async def set_timer_duration(
    payload: TimerDurationUpdate,
    session: ActiveSession = Depends(_current),
):
    """Pick the rest duration; must be one of the timer's options."""
    try:
        session.set_timer_duration(payload.seconds)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return SessionRead.from_session(session)


@router.post("/finish", response_model=WorkoutRead)
async def finish_session(
    user_id: uuid.UUID = Depends(get_current_user),
    registry: SessionRegistry = Depends(get_session_registry),
    workouts: WorkoutRepository = Depends(get_workout_repo),
    db: AsyncSession = Depends(get_db),
):
    """Save results (first set's weight per exercise) and close the session.

    The transaction is committed before the session is released; if that
    fails the client gets 503 and the session is still there to retry.
    """
    session = registry.get(user_id)

    async def commit() -> None:
        with store_errors("finish workout"):
            await db.commit()

    workout = await session.finish(workouts, commit=commit)
    registry.release(user_id, session)
    return workout
