"""Exercise statistics endpoints."""

from fastapi import APIRouter, Depends

from workout_log.core.dependencies import get_store
from workout_log.repositories.workout_store import WorkoutStore
from workout_log.schemas.workout import ProgressPoint, WorkoutStats
from workout_log.services.workout_stats import compute_stats, exercise_progression

router = APIRouter()


@router.get("/{exercise_name}", response_model=WorkoutStats)
async def exercise_stats(exercise_name: str, store: WorkoutStore = Depends(get_store)):
    """
    Totals for one exercise (name matched case-insensitively):
    total volume, average and max weight, number of sets, first/last set.
    An exercise that was never recorded returns zeros and null dates.
    """
    return await compute_stats(store, exercise_name)


@router.get("/{exercise_name}/progression", response_model=list[ProgressPoint])
async def exercise_progress(exercise_name: str, store: WorkoutStore = Depends(get_store)):
    """Weight per set over time, oldest first (for the progress chart)."""
    return await exercise_progression(store, exercise_name)
