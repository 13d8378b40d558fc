"""Async repository over the workout_entries table."""

from __future__ import annotations

import logging
import uuid
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from workout_log.core.exceptions import StoreError
from workout_log.models.workout import WorkoutEntry

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Workout store failed during %s", operation)
        raise StoreError(operation) from exc


class WorkoutStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _writing(self, operation: str) -> AsyncIterator[None]:
        """Roll the session back when a write fails, then report StoreError."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.exception("Workout store failed during %s", operation)
            await self.db.rollback()
            raise StoreError(operation) from exc

    async def add(self, entry: WorkoutEntry) -> WorkoutEntry:
        async with self._writing("insert"):
            self.db.add(entry)
            await self.db.flush()
            await self.db.refresh(entry)
        return entry

    async def get(self, entry_id: uuid.UUID) -> WorkoutEntry | None:
        with _store_errors("get"):
            return await self.db.get(WorkoutEntry, entry_id)

    async def delete(self, entry: WorkoutEntry) -> None:
        async with self._writing("delete"):
            await self.db.delete(entry)
            await self.db.flush()

    async def save(self, entry: WorkoutEntry) -> WorkoutEntry:
        """Flush in-place changes to an already loaded entry."""
        async with self._writing("update"):
            await self.db.flush()
            await self.db.refresh(entry)
        return entry

    async def commit(self) -> None:
        """Commit the unit of work; roll back before reporting a failure."""
        async with self._writing("commit"):
            await self.db.commit()

    async def scan(
        self,
        *,
        exercise_key: str | None = None,
        since: datetime | None = None,
        until: datetime | None = None,
        personal_records_only: bool = False,
        newest_first: bool = True,
    ) -> list[WorkoutEntry]:
        """All entries matching every given filter, ordered by recorded_at."""
        stmt = select(WorkoutEntry)
        if exercise_key is not None:
            stmt = stmt.where(WorkoutEntry.exercise_key == exercise_key)
        if since is not None:
            stmt = stmt.where(WorkoutEntry.recorded_at >= since)
        if until is not None:
            stmt = stmt.where(WorkoutEntry.recorded_at <= until)
        if personal_records_only:
            stmt = stmt.where(WorkoutEntry.is_personal_record.is_(True))
        order = WorkoutEntry.recorded_at.desc() if newest_first else WorkoutEntry.recorded_at.asc()
        stmt = stmt.order_by(order)
        with _store_errors("scan"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def max_weight(self, exercise_key: str) -> float | None:
        """Heaviest weight ever stored for the exercise, None if it was never recorded."""
        with _store_errors("max_weight"):
            result = await self.db.execute(
                select(func.max(WorkoutEntry.weight_kg)).where(WorkoutEntry.exercise_key == exercise_key)
            )
            value = result.scalar()
        return float(value) if value is not None else None

    async def ping(self) -> None:
        with _store_errors("ping"):
            await self.db.execute(select(1))
