"""Home screen statistics."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from fitmaster.core.constants import RECENT_WORKOUTS_DAYS
from fitmaster.core.enums import WorkoutStatus
from fitmaster.schemas.stats import StatsRead
from fitmaster.schemas.workout import WorkoutRead


def _utc(dt: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return dt.replace(tzinfo=timezone.utc) if dt.tzinfo is None else dt


def compute_stats(
    total_exercises: int,
    workouts: Sequence[WorkoutRead],
    now: datetime | None = None,
) -> StatsRead:
    now = _utc(now or datetime.now(timezone.utc))
    week_ago = now - timedelta(days=RECENT_WORKOUTS_DAYS)
    return StatsRead(
        total_exercises=total_exercises,
        total_workouts=len(workouts),
        workouts_this_week=sum(1 for w in workouts if _utc(w.created_at) > week_ago),
        completed_workouts=sum(1 for w in workouts if w.status is WorkoutStatus.COMPLETED),
    )
