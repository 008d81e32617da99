"""Trainings schema: trainings, trained_exercises, global training templates.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "trainings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("is_done", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("planned_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("actual_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("finished_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("total_duration", sa.Interval(), nullable=True),
        sa.Column("total_rest_time", sa.Interval(), nullable=True),
        sa.Column("total_exercise_time", sa.Interval(), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("is_paused", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("paused_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("paused_duration", sa.Interval(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_trainings")),
    )
    op.create_index("ix_trainings_user_planned", "trainings", ["user_id", "planned_date"], unique=False)

    op.create_table(
        "trained_exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("training_id", sa.Integer(), nullable=False),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Numeric(precision=8, scale=2), nullable=True),
        sa.Column("approaches", sa.Integer(), nullable=True),
        sa.Column("reps", sa.Integer(), nullable=True),
        sa.Column("time", sa.Interval(), nullable=True),
        sa.Column("doing", sa.Interval(), nullable=True),
        sa.Column("rest", sa.Interval(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["training_id"],
            ["trainings.id"],
            ondelete="CASCADE",
            name=op.f("fk_trained_exercises_training_id_trainings"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_trained_exercises")),
    )
    op.create_index("ix_trained_exercises_training_id", "trained_exercises", ["training_id"], unique=False)

    op.create_table(
        "global_trainings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("level", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_global_trainings")),
    )
    op.create_index(op.f("ix_global_trainings_level"), "global_trainings", ["level"], unique=False)

    op.create_table(
        "global_training_exercises",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("global_training_id", sa.Integer(), nullable=False),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(
            ["global_training_id"],
            ["global_trainings.id"],
            ondelete="CASCADE",
            name=op.f("fk_global_training_exercises_global_training_id_global_trainings"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_global_training_exercises")),
    )
    op.create_index(
        op.f("ix_global_training_exercises_global_training_id"),
        "global_training_exercises",
        ["global_training_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_global_training_exercises_global_training_id"), table_name="global_training_exercises")
    op.drop_table("global_training_exercises")
    op.drop_index(op.f("ix_global_trainings_level"), table_name="global_trainings")
    op.drop_table("global_trainings")
    op.drop_index("ix_trained_exercises_training_id", table_name="trained_exercises")
    op.drop_table("trained_exercises")
    op.drop_index("ix_trainings_user_planned", table_name="trainings")
    op.drop_table("trainings")
