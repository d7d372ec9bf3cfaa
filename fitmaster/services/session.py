"""
Active workout session tracker.

Loads the user's most recent active workout, keeps per-set weight/completion
while the user trains, drives the rest timer and writes the results back when
the session is finished. States: loading -> in_progress -> finished, or
loading -> empty when there is no active workout.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fitmaster.core.enums import SessionState, WorkoutStatus
from fitmaster.core.errors import NotFoundError, SessionStateError
from fitmaster.repositories.ports import ExerciseRepository, WorkoutRepository
from fitmaster.schemas.exercise import ExerciseRead
from fitmaster.schemas.workout import WorkoutExercise, WorkoutRead, WorkoutUpdate
from fitmaster.services.rest_timer import RestTimer, TimerTicker

logger = logging.getLogger(__name__)


@dataclass
class SetResult:
    weight: float
    completed: bool = False


@dataclass
class ActiveWorkoutExercise:
    """A workout entry joined with its exercise plus the live per-set state."""

    exercise_id: uuid.UUID
    sets: int
    reps: int
    weight: float
    exercise: ExerciseRead | None
    current_set: int = 0
    set_results: list[SetResult] = field(default_factory=list)

    @classmethod
    def from_workout_entry(
        cls, entry: WorkoutExercise, exercise: ExerciseRead | None
    ) -> "ActiveWorkoutExercise":
        return cls(
            exercise_id=entry.exercise_id,
            sets=entry.sets,
            reps=entry.reps,
            weight=entry.weight,
            exercise=exercise,
            set_results=[SetResult(weight=entry.weight) for _ in range(entry.sets)],
        )

    @property
    def completed_sets(self) -> int:
        return sum(1 for s in self.set_results if s.completed)

    @property
    def all_completed(self) -> bool:
        return all(s.completed for s in self.set_results)

    def result(self, set_index: int) -> SetResult:
        if not 0 <= set_index < len(self.set_results):
            raise SessionStateError(f"Set {set_index} out of range")
        return self.set_results[set_index]

    def finalized(self) -> WorkoutExercise:
        # The first set's weight is what gets recorded for the exercise.
        weight = self.set_results[0].weight if self.set_results else 0
        return WorkoutExercise(
            exercise_id=self.exercise_id,
            sets=self.sets,
            reps=self.reps,
            weight=weight,
            completed=self.all_completed,
        )


class ActiveSession:
    """Live state of one workout for one user.

    Store access happens only in load() and finish(), with repositories passed
    per call; everything in between is in-memory.
    """

    def __init__(self, timer: RestTimer | None = None, *, autotick: bool = False):
        self.timer = timer or RestTimer()
        self._ticker = TimerTicker(self.timer) if autotick else None
        self.state = SessionState.LOADING
        self.user_id: uuid.UUID | None = None
        self.workout: WorkoutRead | None = None
        self.exercises: list[ActiveWorkoutExercise] = []
        self.current_exercise_index = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def load(
        self,
        user_id: uuid.UUID,
        exercises: ExerciseRepository,
        workouts: WorkoutRepository,
    ) -> SessionState:
        """Load the most recent active workout. A StoreError leaves the session in loading."""
        if self.state is not SessionState.LOADING or self._closed:
            raise SessionStateError("Session already loaded")
        self.user_id = user_id

        active = await workouts.list(user_id, status=WorkoutStatus.ACTIVE, limit=1)
        if self._closed:
            logger.info("Session closed while loading; discarding result")
            return self.state
        if not active:
            self.state = SessionState.EMPTY
            logger.info("No active workout for user %s", user_id)
            return self.state

        workout = active[0]
        details = await exercises.get_many(user_id, [e.exercise_id for e in workout.exercises])
        if self._closed:
            logger.info("Session closed while loading; discarding result")
            return self.state

        missing = [e.exercise_id for e in workout.exercises if e.exercise_id not in details]
        if missing:
            logger.warning("Workout %s references deleted exercises: %s", workout.id, missing)

        self.workout = workout
        self.exercises = [
            ActiveWorkoutExercise.from_workout_entry(entry, details.get(entry.exercise_id))
            for entry in workout.exercises
        ]
        self.current_exercise_index = 0
        self.state = SessionState.IN_PROGRESS
        logger.info("Loaded workout %s (%d exercises)", workout.id, len(self.exercises))
        return self.state

    def _require_in_progress(self) -> None:
        if self._closed and self.state is not SessionState.FINISHED:
            raise SessionStateError("Session closed")
        if self.state is not SessionState.IN_PROGRESS:
            raise SessionStateError(f"Session is {self.state.value}")

    def exercise(self, index: int) -> ActiveWorkoutExercise:
        self._require_in_progress()
        if not 0 <= index < len(self.exercises):
            raise SessionStateError(f"Exercise {index} out of range")
        return self.exercises[index]

    @property
    def current_exercise(self) -> ActiveWorkoutExercise | None:
        if not self.exercises:
            return None
        return self.exercises[self.current_exercise_index]

    # Sets

    def update_set_weight(self, exercise_index: int, set_index: int, weight: float) -> None:
        if weight < 0:
            raise ValueError("Weight cannot be negative")
        self.exercise(exercise_index).result(set_index).weight = weight

    def complete_set(self, exercise_index: int, set_index: int) -> None:
        """Mark a set done, move the set pointer forward and start resting unless it was the last set."""
        ex = self.exercise(exercise_index)
        ex.result(set_index).completed = True
        ex.current_set = max(ex.current_set, min(set_index + 1, ex.sets - 1))
        if set_index < ex.sets - 1:
            self.start_timer()

    def uncomplete_set(self, exercise_index: int, set_index: int) -> None:
        # current_set is deliberately left where it is.
        self.exercise(exercise_index).result(set_index).completed = False

    # Navigation

    def next_exercise(self) -> bool:
        self._require_in_progress()
        if self.current_exercise_index >= len(self.exercises) - 1:
            return False
        self.current_exercise_index += 1
        self.reset_timer()
        return True

    def previous_exercise(self) -> bool:
        self._require_in_progress()
        if self.current_exercise_index <= 0:
            return False
        self.current_exercise_index -= 1
        self.reset_timer()
        return True

    def select_exercise(self, index: int) -> None:
        self.exercise(index)
        self.current_exercise_index = index
        self.reset_timer()

    # Progress

    @property
    def total_sets(self) -> int:
        return sum(ex.sets for ex in self.exercises)

    @property
    def completed_sets(self) -> int:
        return sum(ex.completed_sets for ex in self.exercises)

    @property
    def progress(self) -> float:
        """Completed sets as a percentage of all sets (0 when there are none)."""
        total = self.total_sets
        if total == 0:
            return 0.0
        return self.completed_sets / total * 100

    # Rest timer

    def start_timer(self) -> None:
        self._require_in_progress()
        self.timer.start()
        if self._ticker:
            self._ticker.restart()

    def pause_timer(self) -> None:
        self._require_in_progress()
        self.timer.pause()
        if self._ticker:
            self._ticker.cancel()

    def resume_timer(self) -> None:
        self._require_in_progress()
        self.timer.resume()
        if self._ticker:
            self._ticker.restart()

    def reset_timer(self) -> None:
        self.timer.reset()
        if self._ticker:
            self._ticker.cancel()

    def set_timer_duration(self, seconds: int) -> None:
        self._require_in_progress()
        self.timer.set_duration(seconds)

    # Finish / teardown

    async def finish(
        self,
        workouts: WorkoutRepository,
        now: datetime | None = None,
        *,
        commit: Callable[[], Awaitable[None]] | None = None,
    ) -> WorkoutRead:
        """Write results back and end the session.

        `commit` makes the write durable (the request's transaction); the
        session is only torn down once it returns. On a store failure the
        error propagates and the session stays in progress so the user can retry.
        """
        self._require_in_progress()
        patch = WorkoutUpdate(
            status=WorkoutStatus.COMPLETED,
            completed_at=now or datetime.now(timezone.utc),
            exercises=[ex.finalized() for ex in self.exercises],
        )
        updated = await workouts.update(self.user_id, self.workout.id, patch)
        if updated is None:
            raise NotFoundError("Workout", self.workout.id)
        if commit is not None:
            await commit()
        self.state = SessionState.FINISHED
        logger.info("Finished workout %s (%.0f%% of sets done)", updated.id, self.progress)
        self.close()
        return updated

    def close(self) -> None:
        """Tear down: stop the ticker and drop in-memory state."""
        self._closed = True
        self.timer.reset()
        if self._ticker:
            self._ticker.cancel()
        self.exercises = []
