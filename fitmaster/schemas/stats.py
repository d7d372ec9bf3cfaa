"""Home screen statistics."""

from pydantic import BaseModel


class StatsRead(BaseModel):
    total_exercises: int
    total_workouts: int
    workouts_this_week: int
    completed_workouts: int
