"""Shared enums for models and API."""

from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle group tag of an exercise."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    ABS = "abs"
    CARDIO = "cardio"


class LoadType(str, Enum):
    """What provides the resistance."""

    BODYWEIGHT = "bodyweight"
    ADDITIONAL_WEIGHT = "additional_weight"  # Bodyweight + plates/belt
    RESISTANCE_BAND = "resistance_band"
    MACHINE = "machine"


class ExerciseType(str, Enum):
    """Priority tier used when generating a workout (main first)."""

    MAIN = "main"
    AUXILIARY = "auxiliary"
    ISOLATION = "isolation"


class WorkoutStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


class SessionState(str, Enum):
    """Lifecycle of a live workout session."""

    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    EMPTY = "empty"  # No active workout: client goes back to the generator


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"
