"""ORM models - import all so Base.metadata is complete for migrations."""

from fitmaster.models.exercise import Exercise
from fitmaster.models.user import User
from fitmaster.models.workout import Workout

__all__ = [
    "Exercise",
    "User",
    "Workout",
]
