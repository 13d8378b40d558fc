"""Per-exercise serialization of record operations."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from weakref import WeakValueDictionary


class ExerciseLocks:
    """Keyed asyncio locks, one per normalized exercise name.

    Holding the lock across "read previous max, insert, commit" makes PR
    detection linearizable for requests served by this process. Locks are
    weakly referenced and disappear once nobody holds or waits on them.
    """

    def __init__(self) -> None:
        self._locks: WeakValueDictionary[str, asyncio.Lock] = WeakValueDictionary()

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._lock_for(key)
        async with lock:
            yield
