"""API Dependencies — hand the lifespan-owned service to route handlers.

Invariants:
    - The service lives on app.state, built once per process by the lifespan
    - Routes never construct gateways or sessions themselves

Design Decisions:
    - Dependency function over direct app.state access in routes: tests swap it
      with app.dependency_overrides
"""

from fastapi import HTTPException, Request, status

from bioskop_api.services.cinema_service import CinemaService


def get_cinema_service(request: Request) -> CinemaService:
    service = getattr(request.app.state, "cinema_service", None)
    if service is None:
        raise HTTPException(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return service
