"""WorkoutEntry model: one recorded set."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, Float, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from workout_log.core.constants import EXERCISE_NAME_MAX_LENGTH
from workout_log.db.base import Base
from workout_log.db.types import UTCDateTime


def exercise_key(name: str) -> str:
    """Normalized exercise identity: trimmed and lower-cased."""
    return name.strip().lower()


class WorkoutEntry(Base):
    """A single set: exercise, reps, weight. Timestamp and PR flag are set on creation."""

    __tablename__ = "workout_entries"
    __table_args__ = (
        Index("ix_workout_entries_exercise_key", "exercise_key"),
        Index("ix_workout_entries_recorded_at", "recorded_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exercise_name: Mapped[str] = mapped_column(String(EXERCISE_NAME_MAX_LENGTH), nullable=False)
    exercise_key: Mapped[str] = mapped_column(String(EXERCISE_NAME_MAX_LENGTH), nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    weight_kg: Mapped[float] = mapped_column(Float, nullable=False)
    recorded_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    is_personal_record: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    @property
    def volume(self) -> float:
        """weight x reps for this set."""
        return float(self.weight_kg) * int(self.reps)

    def __repr__(self) -> str:
        return (
            f"WorkoutEntry(id={self.id!s}, exercise_name={self.exercise_name!r}, "
            f"reps={self.reps}, weight_kg={self.weight_kg}, pr={self.is_personal_record})"
        )
