"""Live session views and request bodies."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from fitmaster.core.enums import SessionState, TimerState
from fitmaster.schemas.exercise import ExerciseRead
from fitmaster.services.rest_timer import RestTimer
from fitmaster.services.session import ActiveSession, ActiveWorkoutExercise


class SetResultRead(BaseModel):
    weight: float
    completed: bool


class ActiveExerciseRead(BaseModel):
    exercise_id: UUID
    sets: int
    reps: int
    exercise: ExerciseRead | None = None
    current_set: int
    completed_sets: int
    set_results: list[SetResultRead]

    @classmethod
    def from_active(cls, ex: ActiveWorkoutExercise) -> "ActiveExerciseRead":
        return cls(
            exercise_id=ex.exercise_id,
            sets=ex.sets,
            reps=ex.reps,
            exercise=ex.exercise,
            current_set=ex.current_set,
            completed_sets=ex.completed_sets,
            set_results=[SetResultRead(weight=s.weight, completed=s.completed) for s in ex.set_results],
        )


class TimerRead(BaseModel):
    duration: int
    time_left: int
    state: TimerState
    formatted: str
    options: list[int]

    @classmethod
    def from_timer(cls, timer: RestTimer) -> "TimerRead":
        return cls(
            duration=timer.duration,
            time_left=timer.time_left,
            state=timer.state,
            formatted=timer.formatted(),
            options=list(timer.options),
        )


class SessionRead(BaseModel):
    state: SessionState
    redirect_to: str | None = None
    workout_id: UUID | None = None
    workout_name: str | None = None
    current_exercise_index: int = 0
    progress: float = 0
    exercises: list[ActiveExerciseRead] = []
    timer: TimerRead | None = None

    @classmethod
    def from_session(cls, session: ActiveSession) -> "SessionRead":
        if session.state is SessionState.EMPTY:
            return cls(state=session.state, redirect_to="generator")
        workout = session.workout
        return cls(
            state=session.state,
            workout_id=workout.id if workout else None,
            workout_name=workout.name if workout else None,
            current_exercise_index=session.current_exercise_index,
            progress=session.progress,
            exercises=[ActiveExerciseRead.from_active(ex) for ex in session.exercises],
            timer=TimerRead.from_timer(session.timer),
        )


class SetWeightUpdate(BaseModel):
    weight: float = Field(..., ge=0)


class TimerDurationUpdate(BaseModel):
    seconds: int
