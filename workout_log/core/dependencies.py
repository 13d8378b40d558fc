"""FastAPI dependencies wiring the store, clock and recorder into endpoints."""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.core.clock import Clock, SystemClock
from workout_log.core.locks import ExerciseLocks
from workout_log.db.session import get_db
from workout_log.repositories.workout_store import WorkoutStore
from workout_log.services.workout_recorder import WorkoutRecorder


def get_store(db: AsyncSession = Depends(get_db)) -> WorkoutStore:
    return WorkoutStore(db)


def get_clock() -> Clock:
    return SystemClock()


@lru_cache
def get_exercise_locks() -> ExerciseLocks:
    """Process-wide lock registry shared by every request."""
    return ExerciseLocks()


def get_recorder(
    store: WorkoutStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
    locks: ExerciseLocks = Depends(get_exercise_locks),
) -> WorkoutRecorder:
    return WorkoutRecorder(store, clock, locks)
