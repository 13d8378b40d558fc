"""
Shared fixtures for the workout log tests.

Strategy:
- Every test gets its own in-memory SQLite database (aiosqlite, StaticPool so all
  sessions share the one connection) with the tables created from the models.
- Time is pinned with FixedClock; tests move it explicitly with clock.advance().
- HTTP tests build a bare FastAPI app (no lifespan, no real engine) and override
  get_db / get_clock / get_exercise_locks.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import workout_log.models  # noqa: F401 - register all models
from workout_log.api.errors import register_exception_handlers
from workout_log.api.v1 import api_router
from workout_log.core.clock import FixedClock
from workout_log.core.dependencies import get_clock, get_exercise_locks
from workout_log.core.locks import ExerciseLocks
from workout_log.db.base import Base
from workout_log.db.session import get_db
from workout_log.repositories.workout_store import WorkoutStore
from workout_log.services.workout_recorder import WorkoutRecorder

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


def create_test_app() -> FastAPI:
    """Test FastAPI app without the production lifespan."""
    test_app = FastAPI(title="Workout Log Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router, prefix="/api/v1")
    return test_app


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


# ---------------------------------------------------------------------------
# Core objects
# ---------------------------------------------------------------------------

@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def store(db_session) -> WorkoutStore:
    return WorkoutStore(db_session)


@pytest.fixture
def recorder(store, clock) -> WorkoutRecorder:
    return WorkoutRecorder(store, clock, ExerciseLocks())


@pytest.fixture
def record(recorder, clock):
    """Record a set, then move the clock one minute so timestamps stay ordered."""

    async def _record(name: str, reps: int, weight: float):
        entry = await recorder.record({"exercise_name": name, "reps": reps, "weight_kg": weight})
        clock.advance(minutes=1)
        return entry

    return _record


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest.fixture
async def client(session_maker, clock) -> AsyncGenerator[AsyncClient, None]:
    """Client against the v1 router; each request gets its own session on the test database."""

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_test_app()
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    locks = ExerciseLocks()
    app.dependency_overrides[get_exercise_locks] = lambda: locks
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
