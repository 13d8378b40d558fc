"""PR detection: flag a set as PR if it beats the all-time best weight for that exercise."""

import logging

from workout_log.models.workout import exercise_key
from workout_log.repositories.workout_store import WorkoutStore

logger = logging.getLogger(__name__)


async def is_personal_record(store: WorkoutStore, exercise_name: str, weight_kg: float) -> bool:
    """
    Compare this set's weight to the heaviest stored set of the same exercise
    (case-insensitive). Call before inserting: the current max is the previous best.
    First set of an exercise is always a PR; equalling the best is not.
    """
    previous_best = await store.max_weight(exercise_key(exercise_name))
    if previous_best is None:
        logger.debug("First %r set recorded, flagged as PR", exercise_name)
        return True
    is_pr = float(weight_kg) > previous_best
    logger.debug("%r %.2f kg vs best %.2f kg -> pr=%s", exercise_name, weight_kg, previous_best, is_pr)
    return is_pr
