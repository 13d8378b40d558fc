"""Workout entry endpoints: record, read, edit, delete, and list views."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query

from workout_log.core.clock import Clock
from workout_log.core.config import get_settings
from workout_log.core.dependencies import get_clock, get_recorder, get_store
from workout_log.core.enums import Period, PROrder
from workout_log.repositories.workout_store import WorkoutStore
from workout_log.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate
from workout_log.services import workout_views
from workout_log.services.workout_recorder import WorkoutRecorder

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    exercise: str | None = None,
    period: Period | None = None,
    prs_only: bool = False,
    store: WorkoutStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """All sets, newest first. Optionally filter by exercise (any case), period and PR flag."""
    if exercise is None and period is None and not prs_only:
        return await workout_views.list_all(store)
    return await workout_views.filter_workouts(
        store, clock, exercise=exercise, period=period, prs_only=prs_only
    )


@router.post("", response_model=WorkoutRead, status_code=201)
async def record_workout(
    payload: WorkoutCreate,
    recorder: WorkoutRecorder = Depends(get_recorder),
):
    """Record a set. Timestamp and PR flag are assigned by the server."""
    return await recorder.record(payload)


@router.get("/recent", response_model=list[WorkoutRead])
async def recent_workouts(
    days: int | None = Query(None, ge=1, le=366),
    store: WorkoutStore = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """Sets from the last `days` days (default from settings, 7), newest first."""
    return await workout_views.list_recent(store, clock, days or get_settings().recent_window_days)


@router.get("/prs", response_model=list[WorkoutRead])
async def personal_records(
    order: PROrder = PROrder.RECENT,
    store: WorkoutStore = Depends(get_store),
):
    """Sets flagged as personal records when they were recorded."""
    return await workout_views.list_personal_records(store, order)


@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(
    workout_id: uuid.UUID,
    recorder: WorkoutRecorder = Depends(get_recorder),
):
    return await recorder.get(workout_id)


@router.put("/{workout_id}", response_model=WorkoutRead)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutUpdate,
    recorder: WorkoutRecorder = Depends(get_recorder),
):
    """Overwrite name, reps, weight and PR flag. PR status is not recomputed."""
    return await recorder.update(workout_id, payload)


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    recorder: WorkoutRecorder = Depends(get_recorder),
):
    """Delete a set. PR flags of the remaining sets are left as they are."""
    await recorder.delete(workout_id)
    return None
