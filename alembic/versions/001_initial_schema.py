"""Initial schema: workout_entries.

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
        "workout_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("exercise_name", sa.String(length=100), nullable=False),
        sa.Column("exercise_key", sa.String(length=100), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("weight_kg", sa.Float(), nullable=False),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_personal_record", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_workout_entries_exercise_key", "workout_entries", ["exercise_key"], unique=False)
    op.create_index("ix_workout_entries_recorded_at", "workout_entries", ["recorded_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_workout_entries_recorded_at", table_name="workout_entries")
    op.drop_index("ix_workout_entries_exercise_key", table_name="workout_entries")
    op.drop_table("workout_entries")
