"""Recording and editing of workout entries: the only writes in the system."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from workout_log.core.clock import Clock
from workout_log.core.exceptions import NotFoundError
from workout_log.core.locks import ExerciseLocks
from workout_log.models.workout import WorkoutEntry, exercise_key
from workout_log.repositories.workout_store import WorkoutStore
from workout_log.schemas.workout import WorkoutCreate, WorkoutUpdate
from workout_log.services.pr_detection import is_personal_record
from workout_log.services.validation import validate_workout

logger = logging.getLogger(__name__)


class WorkoutRecorder:
    """Validate, timestamp, classify and persist sets.

    Records for the same exercise are serialized through `locks` and committed
    before the lock is released, so two concurrent sets can't both be
    classified against the same previous best. PR flags are assigned once:
    deleting or editing entries never re-derives them.
    """

    def __init__(self, store: WorkoutStore, clock: Clock, locks: ExerciseLocks):
        self.store = store
        self.clock = clock
        self.locks = locks

    async def record(self, data: Mapping[str, Any] | BaseModel) -> WorkoutEntry:
        payload = validate_workout(WorkoutCreate, data)
        key = exercise_key(payload.exercise_name)
        recorded_at = self.clock.now()

        async with self.locks.hold(key):
            is_pr = await is_personal_record(self.store, payload.exercise_name, payload.weight_kg)
            entry = WorkoutEntry(
                exercise_name=payload.exercise_name,
                exercise_key=key,
                reps=payload.reps,
                weight_kg=payload.weight_kg,
                recorded_at=recorded_at,
                is_personal_record=is_pr,
            )
            entry = await self.store.add(entry)
            await self.store.commit()

        logger.info(
            "Recorded %s: %d x %.2f kg (pr=%s)",
            entry.exercise_name, entry.reps, entry.weight_kg, entry.is_personal_record,
        )
        return entry

    async def get(self, entry_id: uuid.UUID) -> WorkoutEntry:
        entry = await self.store.get(entry_id)
        if entry is None:
            raise NotFoundError(entry_id)
        return entry

    async def update(self, entry_id: uuid.UUID, data: Mapping[str, Any] | BaseModel) -> WorkoutEntry:
        """Overwrite name, reps, weight and PR flag. recorded_at is kept, PR is not re-derived."""
        payload = validate_workout(WorkoutUpdate, data)
        entry = await self.get(entry_id)
        entry.exercise_name = payload.exercise_name
        entry.exercise_key = exercise_key(payload.exercise_name)
        entry.reps = payload.reps
        entry.weight_kg = payload.weight_kg
        entry.is_personal_record = payload.is_personal_record
        entry = await self.store.save(entry)
        await self.store.commit()
        logger.info("Updated workout %s", entry_id)
        return entry

    async def delete(self, entry_id: uuid.UUID) -> None:
        entry = await self.get(entry_id)
        await self.store.delete(entry)
        await self.store.commit()
        logger.info("Deleted workout %s (%s)", entry_id, entry.exercise_name)
