"""Exercise listing endpoints."""

from fastapi import APIRouter, Depends

from workout_log.core.dependencies import get_store
from workout_log.repositories.workout_store import WorkoutStore
from workout_log.schemas.workout import WorkoutRead
from workout_log.services import workout_views

router = APIRouter()


@router.get("", response_model=list[str])
async def list_exercise_names(store: WorkoutStore = Depends(get_store)):
    """Distinct exercise names (case-insensitive), alphabetical."""
    return await workout_views.list_unique_exercise_names(store)


@router.get("/{exercise_name}/workouts", response_model=list[WorkoutRead])
async def list_exercise_workouts(exercise_name: str, store: WorkoutStore = Depends(get_store)):
    return await workout_views.list_by_exercise(store, exercise_name)
