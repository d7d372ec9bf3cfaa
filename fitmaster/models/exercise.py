"""Exercise model - user-owned exercise definition used by the catalog and generator."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitmaster.core.enums import ExerciseType, LoadType, MuscleGroup
from fitmaster.db.base import Base


class Exercise(Base):
    """Exercise definition: muscle group, load type, priority tier and default sets x reps."""

    __tablename__ = "exercises"
    __table_args__ = (Index("ix_exercises_user_muscle_group", "user_id", "muscle_group"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    muscle_group: Mapped[MuscleGroup] = mapped_column(Enum(MuscleGroup), nullable=False)
    load_type: Mapped[LoadType] = mapped_column(Enum(LoadType), nullable=False)
    exercise_type: Mapped[ExerciseType] = mapped_column(Enum(ExerciseType), nullable=False)
    sets: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, default=10)
    technique: Mapped[str] = mapped_column(Text, nullable=False, default="")
    video_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    machine_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    machine_settings: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship("User", back_populates="exercises")
