"""Workout entry, stats and progression schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from workout_log.core.constants import (
    EXERCISE_NAME_MAX_LENGTH,
    EXERCISE_NAME_MIN_LENGTH,
    REPS_MAX,
    REPS_MIN,
    WEIGHT_MAX_KG,
)


class WorkoutFields(BaseModel):
    """Field rules shared by create and update payloads."""

    model_config = ConfigDict(str_strip_whitespace=True)

    exercise_name: str = Field(
        ..., min_length=EXERCISE_NAME_MIN_LENGTH, max_length=EXERCISE_NAME_MAX_LENGTH
    )
    reps: int = Field(..., ge=REPS_MIN, le=REPS_MAX, strict=True)
    weight_kg: float = Field(..., gt=0, le=WEIGHT_MAX_KG, allow_inf_nan=False)


class WorkoutCreate(WorkoutFields):
    pass


class WorkoutUpdate(WorkoutFields):
    is_personal_record: bool = False


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    exercise_name: str
    reps: int
    weight_kg: float
    recorded_at: datetime
    is_personal_record: bool


class WorkoutStats(BaseModel):
    """Aggregate over every set of one exercise. Timestamps are None when nothing was recorded."""

    exercise_name: str
    total_volume: float = 0.0
    average_weight: float = 0.0
    max_weight: float = 0.0
    total_sets: int = 0
    first_workout: datetime | None = None
    last_workout: datetime | None = None


class ProgressPoint(BaseModel):
    """One point of an exercise's weight progression (oldest first)."""

    recorded_at: datetime
    weight_kg: float
    reps: int
    volume: float
    is_personal_record: bool
