"""Muscle group selection for the next generated workout."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from fitmaster.core.enums import MuscleGroup
from fitmaster.schemas.generator import MuscleGroupAvailability, SelectionEntry

logger = logging.getLogger(__name__)


class SelectionModel:
    """Ordered muscle group picks with a per-group exercise count.

    `available` maps each muscle group to the number of catalog exercises the
    user has for it; groups with none cannot be selected.
    """

    def __init__(
        self,
        available: Mapping[MuscleGroup, int],
        *,
        default_count: int = 2,
        min_count: int = 1,
        max_count: int = 4,
    ):
        self._available = dict(available)
        self._default_count = default_count
        self._min_count = min_count
        self._max_count = max_count
        self._entries: list[SelectionEntry] = []

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[SelectionEntry],
        available: Mapping[MuscleGroup, int],
        **limits: int,
    ) -> "SelectionModel":
        """Replay client-side picks through add/set_count so the same rules apply."""
        model = cls(available, **limits)
        for entry in entries:
            model.add(entry.muscle_group)
            if entry.exercise_count is not None:
                model.set_count(entry.muscle_group, entry.exercise_count)
        return model

    @property
    def entries(self) -> list[SelectionEntry]:
        return [entry.model_copy() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, muscle_group: MuscleGroup) -> bool:
        return self._find(muscle_group) is not None

    def _find(self, muscle_group: MuscleGroup) -> SelectionEntry | None:
        return next((e for e in self._entries if e.muscle_group == muscle_group), None)

    def is_selectable(self, muscle_group: MuscleGroup) -> bool:
        return self._available.get(muscle_group, 0) > 0

    def add(self, muscle_group: MuscleGroup) -> bool:
        """Select a group with the default count. False if already selected or unavailable."""
        if not self.is_selectable(muscle_group):
            logger.debug("Ignoring %s: no exercises in catalog", muscle_group.value)
            return False
        if muscle_group in self:
            return False
        self._entries.append(
            SelectionEntry(muscle_group=muscle_group, exercise_count=self._default_count)
        )
        return True

    def remove(self, muscle_group: MuscleGroup) -> bool:
        entry = self._find(muscle_group)
        if entry is None:
            return False
        self._entries.remove(entry)
        return True

    def set_count(self, muscle_group: MuscleGroup, count: int) -> None:
        entry = self._find(muscle_group)
        if entry is None:
            return
        entry.exercise_count = max(self._min_count, min(self._max_count, count))

    def availability(self) -> list[MuscleGroupAvailability]:
        return [
            MuscleGroupAvailability(
                muscle_group=group,
                exercise_count=self._available.get(group, 0),
                selectable=self.is_selectable(group),
            )
            for group in MuscleGroup
        ]
