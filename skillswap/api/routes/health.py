"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the SQL database is unreachable (readiness)
    - Memory backend is always ready once the app has started
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from skillswap.config import Settings, get_settings
import skillswap.infrastructure.database as db_module

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "skillswap-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness probe — includes database connectivity for the SQL backend."""
    if settings.store_backend == "memory":
        return {"status": "ready", "checks": {"store": "memory"}}
    manager = db_module.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
