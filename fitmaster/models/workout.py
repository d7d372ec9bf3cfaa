"""Workout model - a session with its planned/performed exercises embedded as JSON."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitmaster.core.enums import WorkoutStatus
from fitmaster.db.base import Base


class Workout(Base):
    """A workout session. `exercises` holds the ordered WorkoutExercise snapshots:
    [{exercise_id, sets, reps, weight, completed}, ...]."""

    __tablename__ = "workouts"
    __table_args__ = (Index("ix_workouts_user_status_created", "user_id", "status", "created_at"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[WorkoutStatus] = mapped_column(
        Enum(WorkoutStatus), nullable=False, default=WorkoutStatus.ACTIVE
    )
    exercises: Mapped[list[dict]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="workouts")
