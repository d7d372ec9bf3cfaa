"""Selection model: add/remove/set_count rules and unavailable groups."""

import pytest

from fitmaster.core.enums import MuscleGroup
from fitmaster.schemas.generator import SelectionEntry
from fitmaster.services.selection import SelectionModel

AVAILABLE = {MuscleGroup.CHEST: 3, MuscleGroup.BACK: 4, MuscleGroup.LEGS: 1}


@pytest.fixture
def model():
    return SelectionModel(AVAILABLE)


@pytest.mark.unit
class TestSelectionModel:
    def test_add_uses_default_count(self, model):
        assert model.add(MuscleGroup.CHEST) is True
        assert model.entries == [SelectionEntry(muscle_group=MuscleGroup.CHEST, exercise_count=2)]

    def test_add_is_idempotent(self, model):
        model.add(MuscleGroup.CHEST)
        model.set_count(MuscleGroup.CHEST, 4)
        assert model.add(MuscleGroup.CHEST) is False
        assert len(model) == 1
        assert model.entries[0].exercise_count == 4

    def test_add_rejects_group_without_exercises(self, model):
        assert model.add(MuscleGroup.CARDIO) is False
        assert MuscleGroup.CARDIO not in model
        assert len(model) == 0

    def test_keeps_selection_order(self, model):
        model.add(MuscleGroup.LEGS)
        model.add(MuscleGroup.CHEST)
        model.add(MuscleGroup.BACK)
        assert [e.muscle_group for e in model.entries] == [
            MuscleGroup.LEGS,
            MuscleGroup.CHEST,
            MuscleGroup.BACK,
        ]

    def test_remove(self, model):
        model.add(MuscleGroup.CHEST)
        assert model.remove(MuscleGroup.CHEST) is True
        assert model.remove(MuscleGroup.CHEST) is False
        assert len(model) == 0

    @pytest.mark.parametrize("requested,expected", [(0, 1), (-3, 1), (1, 1), (3, 3), (4, 4), (9, 4)])
    def test_set_count_clamps(self, model, requested, expected):
        model.add(MuscleGroup.BACK)
        model.set_count(MuscleGroup.BACK, requested)
        assert model.entries[0].exercise_count == expected

    def test_set_count_ignores_unselected_group(self, model):
        model.set_count(MuscleGroup.CHEST, 3)
        assert len(model) == 0

    def test_entries_are_copies(self, model):
        model.add(MuscleGroup.CHEST)
        model.entries[0].exercise_count = 4
        assert model.entries[0].exercise_count == 2

    def test_availability_marks_empty_groups_unselectable(self, model):
        rows = {row.muscle_group: row for row in model.availability()}
        assert set(rows) == set(MuscleGroup)
        assert rows[MuscleGroup.CHEST].selectable is True
        assert rows[MuscleGroup.CHEST].exercise_count == 3
        assert rows[MuscleGroup.ABS].selectable is False
        assert rows[MuscleGroup.ABS].exercise_count == 0

    def test_from_entries_replays_rules(self):
        entries = [
            SelectionEntry(muscle_group=MuscleGroup.CHEST, exercise_count=7),
            SelectionEntry(muscle_group=MuscleGroup.CARDIO, exercise_count=2),
            SelectionEntry(muscle_group=MuscleGroup.CHEST, exercise_count=1),
            SelectionEntry(muscle_group=MuscleGroup.BACK, exercise_count=0),
        ]
        model = SelectionModel.from_entries(entries, AVAILABLE)
        assert model.entries == [
            SelectionEntry(muscle_group=MuscleGroup.CHEST, exercise_count=1),
            SelectionEntry(muscle_group=MuscleGroup.BACK, exercise_count=1),
        ]

    def test_custom_limits(self):
        model = SelectionModel(AVAILABLE, default_count=3, min_count=2, max_count=6)
        model.add(MuscleGroup.CHEST)
        assert model.entries[0].exercise_count == 3
        model.set_count(MuscleGroup.CHEST, 10)
        assert model.entries[0].exercise_count == 6

    def test_from_entries_without_count_uses_configured_default(self):
        entries = [
            SelectionEntry(muscle_group=MuscleGroup.BACK),
            SelectionEntry(muscle_group=MuscleGroup.CHEST, exercise_count=1),
        ]
        model = SelectionModel.from_entries(entries, AVAILABLE, default_count=3)
        assert [(e.muscle_group, e.exercise_count) for e in model.entries] == [
            (MuscleGroup.BACK, 3),
            (MuscleGroup.CHEST, 1),
        ]
