"""Cinema Routes — HTTP surface of the cinema resource.

Invariants:
    - Path ids arrive as raw strings: "abc" must reach the service to get its 400
    - Bodies arrive as raw bytes: malformed JSON is the service's 400, not FastAPI's
    - Every response is the service outcome encoded as-is
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from bioskop_api.api.deps import get_cinema_service
from bioskop_api.core.outcomes import ServiceOutcome
from bioskop_api.services.cinema_service import CinemaService

router = APIRouter(prefix="/bioskop", tags=["bioskop"])


def _respond(outcome: ServiceOutcome) -> JSONResponse:
    return JSONResponse(status_code=outcome.status_code, content=outcome.body)


@router.post("")
async def create_cinema(
    request: Request, service: CinemaService = Depends(get_cinema_service),
):
    """Create a cinema; the store assigns its id."""
    return _respond(await service.create(await request.body()))


@router.get("")
async def list_cinemas(service: CinemaService = Depends(get_cinema_service)):
    """List all cinemas ordered by id."""
    return _respond(await service.list_all())


@router.get("/{cinema_id}")
async def get_cinema(
    cinema_id: str, service: CinemaService = Depends(get_cinema_service),
):
    return _respond(await service.get(cinema_id))


@router.put("/{cinema_id}")
async def update_cinema(
    cinema_id: str,
    request: Request,
    service: CinemaService = Depends(get_cinema_service),
):
    """Overwrite name, location and rating together."""
    return _respond(await service.update(cinema_id, await request.body()))


@router.delete("/{cinema_id}")
async def delete_cinema(
    cinema_id: str, service: CinemaService = Depends(get_cinema_service),
):
    """Delete a cinema and echo the removed record."""
    return _respond(await service.delete(cinema_id))
