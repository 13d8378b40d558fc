"""Per-exercise statistics, recomputed from the full history on every call."""

from __future__ import annotations

from collections.abc import Sequence

from workout_log.models.workout import WorkoutEntry, exercise_key
from workout_log.repositories.workout_store import WorkoutStore
from workout_log.schemas.workout import ProgressPoint, WorkoutStats


def summarize(exercise_name: str, entries: Sequence[WorkoutEntry]) -> WorkoutStats:
    """Aggregate the given sets. Average weight is per set, not volume-weighted."""
    if not entries:
        return WorkoutStats(exercise_name=exercise_name)

    weights = [float(e.weight_kg) for e in entries]
    timestamps = [e.recorded_at for e in entries]
    return WorkoutStats(
        exercise_name=exercise_name,
        total_volume=sum(e.volume for e in entries),
        average_weight=sum(weights) / len(weights),
        max_weight=max(weights),
        total_sets=len(entries),
        first_workout=min(timestamps),
        last_workout=max(timestamps),
    )


async def compute_stats(store: WorkoutStore, exercise_name: str) -> WorkoutStats:
    """Stats for one exercise, matched case-insensitively. Unsynchronized read."""
    name = exercise_name.strip()
    entries = await store.scan(exercise_key=exercise_key(name))
    return summarize(name, entries)


async def exercise_progression(store: WorkoutStore, exercise_name: str) -> list[ProgressPoint]:
    """Weight over time for charting, oldest set first."""
    entries = await store.scan(exercise_key=exercise_key(exercise_name), newest_first=False)
    return [
        ProgressPoint(
            recorded_at=e.recorded_at,
            weight_kg=float(e.weight_kg),
            reps=e.reps,
            volume=e.volume,
            is_personal_record=e.is_personal_record,
        )
        for e in entries
    ]
