"""Read-only views over the workout history."""

from __future__ import annotations

from datetime import datetime, timedelta

from workout_log.core.clock import Clock
from workout_log.core.constants import PERIOD_MONTH_DAYS, PERIOD_WEEK_DAYS, RECENT_WINDOW_DAYS
from workout_log.core.enums import Period, PROrder
from workout_log.models.workout import WorkoutEntry, exercise_key
from workout_log.repositories.workout_store import WorkoutStore


async def list_all(store: WorkoutStore) -> list[WorkoutEntry]:
    return await store.scan()


async def list_personal_records(store: WorkoutStore, order: PROrder = PROrder.RECENT) -> list[WorkoutEntry]:
    entries = await store.scan(personal_records_only=True)
    if order == PROrder.NAME:
        # stable sort keeps newest first within each exercise
        entries.sort(key=lambda e: e.exercise_key)
    return entries


async def list_recent(store: WorkoutStore, clock: Clock, days: int = RECENT_WINDOW_DAYS) -> list[WorkoutEntry]:
    """Sets recorded within the last `days` days, newest first."""
    if days < 1:
        raise ValueError("days must be at least 1")
    now = clock.now()
    return await store.scan(since=now - timedelta(days=days), until=now)


async def list_by_exercise(store: WorkoutStore, exercise_name: str) -> list[WorkoutEntry]:
    """Entries for one exercise, newest first. Always case-insensitive: names match on exercise_key."""
    return await store.scan(exercise_key=exercise_key(exercise_name))


def period_start(period: Period, now: datetime) -> datetime:
    if period == Period.WEEK:
        return now - timedelta(days=PERIOD_WEEK_DAYS)
    if period == Period.MONTH:
        return now - timedelta(days=PERIOD_MONTH_DAYS)
    return now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)


async def filter_workouts(
    store: WorkoutStore,
    clock: Clock,
    exercise: str | None = None,
    period: Period | None = None,
    prs_only: bool = False,
) -> list[WorkoutEntry]:
    """Workout list filtered by exercise, time period and PR flag; newest first."""
    since = until = None
    if period is not None:
        until = clock.now()
        since = period_start(period, until)
    return await store.scan(
        exercise_key=exercise_key(exercise) if exercise else None,
        since=since,
        until=until,
        personal_records_only=prs_only,
    )


async def list_unique_exercise_names(store: WorkoutStore) -> list[str]:
    """One name per exercise (its earliest spelling), sorted case-insensitively.

    Distinctness uses the normalized key, so "Bench Press" and "bench press"
    are listed once.
    """
    names: dict[str, str] = {}
    for entry in await store.scan(newest_first=False):
        names.setdefault(entry.exercise_key, entry.exercise_name)
    return [names[key] for key in sorted(names)]
