"""ORM models - import all so Base.metadata is complete for migrations."""

from workout_log.models.workout import WorkoutEntry, exercise_key

__all__ = ["WorkoutEntry", "exercise_key"]
