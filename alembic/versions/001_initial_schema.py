"""Initial schema: users, exercises, workouts.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

muscle_group = sa.Enum("CHEST", "BACK", "LEGS", "SHOULDERS", "ARMS", "ABS", "CARDIO", name="musclegroup")
load_type = sa.Enum("BODYWEIGHT", "ADDITIONAL_WEIGHT", "RESISTANCE_BAND", "MACHINE", name="loadtype")
exercise_type = sa.Enum("MAIN", "AUXILIARY", "ISOLATION", name="exercisetype")
workout_status = sa.Enum("ACTIVE", "COMPLETED", "PAUSED", name="workoutstatus")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("muscle_group", muscle_group, nullable=False),
        sa.Column("load_type", load_type, nullable=False),
        sa.Column("exercise_type", exercise_type, nullable=False),
        sa.Column("sets", sa.Integer(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("technique", sa.Text(), nullable=False),
        sa.Column("video_url", sa.String(length=1000), nullable=True),
        sa.Column("machine_name", sa.String(length=255), nullable=True),
        sa.Column("machine_settings", sa.String(length=1000), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("last_weight", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name=op.f("fk_exercises_user_id_users"), ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercises")),
    )
    op.create_index(op.f("ix_exercises_user_id"), "exercises", ["user_id"], unique=False)
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=False)
    op.create_index("ix_exercises_user_muscle_group", "exercises", ["user_id", "muscle_group"], unique=False)

    op.create_table(
        "workouts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("status", workout_status, nullable=False),
        sa.Column("exercises", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(
            ["user_id"], ["users.id"], name=op.f("fk_workouts_user_id_users"), ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workouts")),
    )
    op.create_index(
        "ix_workouts_user_status_created", "workouts", ["user_id", "status", "created_at"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_workouts_user_status_created", table_name="workouts")
    op.drop_table("workouts")
    op.drop_index("ix_exercises_user_muscle_group", table_name="exercises")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_index(op.f("ix_exercises_user_id"), table_name="exercises")
    op.drop_table("exercises")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
    bind = op.get_bind()
    for enum in (workout_status, exercise_type, load_type, muscle_group):
        enum.drop(bind, checkfirst=True)
