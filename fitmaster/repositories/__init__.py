"""Repositories: protocol ports and their SQLAlchemy implementations."""

from fitmaster.repositories.exercises import SqlExerciseRepository
from fitmaster.repositories.ports import ExerciseRepository, UserRepository, WorkoutRepository
from fitmaster.repositories.users import SqlUserRepository
from fitmaster.repositories.workouts import SqlWorkoutRepository

__all__ = [
    "ExerciseRepository",
    "SqlExerciseRepository",
    "SqlUserRepository",
    "SqlWorkoutRepository",
    "UserRepository",
    "WorkoutRepository",
]
