"""Fill an empty database with a few weeks of sample sets, recorded through the normal path."""

import asyncio
import os
import sys
from datetime import datetime, timedelta, timezone

# Add parent directory to path so we can import workout_log modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from workout_log.core.clock import FixedClock
from workout_log.core.locks import ExerciseLocks
from workout_log.db.session import async_session_maker, create_tables, engine
from workout_log.repositories.workout_store import WorkoutStore
from workout_log.services.workout_recorder import WorkoutRecorder

# (exercise, reps, starting weight, weekly increment)
PROGRAM = [
    ("Bench Press", 5, 80.0, 2.5),
    ("Squat", 5, 100.0, 5.0),
    ("Deadlift", 3, 120.0, 5.0),
]
WEEKS = 4


async def seed() -> None:
    await create_tables()
    async with async_session_maker() as session:
        store = WorkoutStore(session)
        if await store.scan():
            print("Database already contains workouts")
            return

        clock = FixedClock(datetime.now(timezone.utc) - timedelta(weeks=WEEKS))
        recorder = WorkoutRecorder(store, clock, ExerciseLocks())
        for week in range(WEEKS):
            for name, reps, start, step in PROGRAM:
                weight = start + step * week
                # a heavy top set, then a back-off set that is never a PR
                await recorder.record({"exercise_name": name, "reps": reps, "weight_kg": weight})
                clock.advance(minutes=4)
                await recorder.record({"exercise_name": name, "reps": reps + 3, "weight_kg": weight - 10})
                clock.advance(minutes=4)
            clock.advance(days=7)
    await engine.dispose()
    print("Seed data inserted")


if __name__ == "__main__":
    asyncio.run(seed())
