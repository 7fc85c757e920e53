"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts the process,
      readiness removes it from the load balancer
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from bioskop_api.api.deps import get_cinema_service
from bioskop_api.services.cinema_service import CinemaService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "bioskop-api",
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness_check(
    service: CinemaService = Depends(get_cinema_service),
):
    """Readiness probe — includes database connectivity."""
    if not await service.ready():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
