"""
Workout generator.

For every selected muscle group the generator draws exercises by priority
tier: main exercises get max(1, floor(count * 0.4)) slots, auxiliary ones the
same share of the requested count, isolation exercises fill what is left and,
if the tiers run dry, any other exercise of the group backfills. Within a
generation no exercise id appears twice.
"""

from __future__ import annotations

import logging
import math
import random
import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

from fitmaster.core.constants import PRIORITY_QUOTA_FRACTION, PRIORITY_TIERS
from fitmaster.core.enums import ExerciseType, MuscleGroup
from fitmaster.core.errors import NotFoundError
from fitmaster.repositories.ports import WorkoutRepository
from fitmaster.schemas.exercise import ExerciseRead
from fitmaster.schemas.generator import GeneratedExercise, GeneratedRef, SelectionEntry
from fitmaster.schemas.workout import WorkoutCreate, WorkoutExercise, WorkoutRead

logger = logging.getLogger(__name__)


def priority_quota(target: int) -> int:
    """Slots reserved for one priority tier when `target` exercises are requested."""
    return max(1, math.floor(target * PRIORITY_QUOTA_FRACTION))


def _generated(exercise: ExerciseRead, is_replaced: bool = False) -> GeneratedExercise:
    data = exercise.model_dump(exclude={"is_replaced"})
    return GeneratedExercise(**data, is_replaced=is_replaced)


class WorkoutGenerator:
    """Random, type-stratified exercise picker. Pass a seeded `rng` for reproducible output."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def _shuffled(self, exercises: Iterable[ExerciseRead]) -> list[ExerciseRead]:
        pool = list(exercises)
        self._rng.shuffle(pool)
        return pool

    def generate(
        self,
        catalog: Sequence[ExerciseRead],
        selections: Iterable[SelectionEntry],
    ) -> list[GeneratedExercise]:
        """Exercises for each selection entry, concatenated in selection order."""
        workout: list[GeneratedExercise] = []
        used: set[uuid.UUID] = set()
        for selection in selections:
            picked = self._pick_group(
                catalog, selection.muscle_group, selection.exercise_count, used
            )
            used.update(e.id for e in picked)
            workout.extend(_generated(e) for e in picked)
        logger.info("Generated workout with %d exercises", len(workout))
        return workout

    def _pick_group(
        self,
        catalog: Sequence[ExerciseRead],
        muscle_group: MuscleGroup,
        target: int,
        used: set[uuid.UUID],
    ) -> list[ExerciseRead]:
        group = [e for e in catalog if e.muscle_group == muscle_group and e.id not in used]
        if not group:
            logger.debug("No exercises for %s, skipping", muscle_group.value)
            return []

        pools = {
            tier: [e for e in group if e.exercise_type == tier] for tier in ExerciseType
        }
        picked: list[ExerciseRead] = []
        remaining = target

        for tier in PRIORITY_TIERS:
            if remaining > 0 and pools[tier]:
                quota = min(remaining, priority_quota(target))
                picked.extend(self._shuffled(pools[tier])[:quota])
                remaining -= quota

        isolation = pools[ExerciseType.ISOLATION]
        if remaining > 0 and isolation:
            picked.extend(self._shuffled(isolation)[:remaining])

        if len(picked) < target:
            chosen = {e.id for e in picked}
            leftovers = [e for e in group if e.id not in chosen]
            picked.extend(self._shuffled(leftovers)[: target - len(picked)])
        return picked

    def replace(
        self,
        catalog: Sequence[ExerciseRead],
        current: Sequence[GeneratedExercise],
        exercise_id: uuid.UUID,
    ) -> tuple[list[GeneratedExercise], bool]:
        """Swap one generated exercise for another of the same group (same type preferred).

        Returns the new list and whether anything changed. The replacement keeps
        the position of the exercise it replaces.
        """
        position = next((i for i, e in enumerate(current) if e.id == exercise_id), None)
        if position is None:
            raise NotFoundError("Generated exercise", exercise_id)
        target = current[position]
        taken = {e.id for e in current}

        same_group = [
            e
            for e in catalog
            if e.muscle_group == target.muscle_group and e.id != target.id and e.id not in taken
        ]
        candidates = [e for e in same_group if e.exercise_type == target.exercise_type]
        if not candidates:
            candidates = same_group
        if not candidates:
            logger.info("No replacement available for exercise %s", exercise_id)
            return list(current), False

        choice = self._rng.choice(candidates)
        updated = list(current)
        updated[position] = _generated(choice, is_replaced=True)
        logger.info("Replaced exercise %s with %s", exercise_id, choice.id)
        return updated, True


def hydrate(
    catalog: Sequence[ExerciseRead], refs: Iterable[GeneratedRef]
) -> list[GeneratedExercise]:
    """Rebuild a generated list from client-held ids against the current catalog."""
    by_id = {e.id: e for e in catalog}
    workout = []
    for ref in refs:
        exercise = by_id.get(ref.exercise_id)
        if exercise is None:
            raise NotFoundError("Exercise", ref.exercise_id)
        workout.append(_generated(exercise, is_replaced=ref.is_replaced))
    return workout


def default_workout_name(now: datetime) -> str:
    return f"Workout {now:%d.%m.%Y}"


async def start_workout(
    workouts: WorkoutRepository,
    user_id: uuid.UUID,
    generated: Sequence[GeneratedExercise],
    *,
    name: str | None = None,
    now: datetime | None = None,
) -> WorkoutRead:
    """Persist the generated list as the user's new active workout."""
    if not generated:
        raise ValueError("Cannot start a workout without exercises")
    now = now or datetime.now(timezone.utc)
    data = WorkoutCreate(
        name=name or default_workout_name(now),
        exercises=[
            WorkoutExercise(
                exercise_id=e.id, sets=e.sets, reps=e.reps, weight=0, completed=False
            )
            for e in generated
        ],
    )
    workout = await workouts.create(user_id, data)
    logger.info("Started workout %s with %d exercises", workout.id, len(generated))
    return workout
