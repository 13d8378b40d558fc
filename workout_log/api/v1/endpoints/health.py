"""Health check endpoint for load balancers and monitoring."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from workout_log.core.dependencies import get_store
from workout_log.core.exceptions import StoreError
from workout_log.repositories.workout_store import WorkoutStore

router = APIRouter()


@router.get("")
async def health():
    """Simple liveness check."""
    return {"status": "ok"}


@router.get("/ready")
async def readiness(store: WorkoutStore = Depends(get_store)):
    """Readiness: app + DB connectivity."""
    try:
        await store.ping()
        return {"status": "ok", "database": "connected"}
    except StoreError as e:
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": str(e)},
        )
