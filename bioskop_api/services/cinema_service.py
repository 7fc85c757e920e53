"""Cinema Service — orchestrates decode, validation, existence checks and storage.

Invariants:
    - Every public method returns a ServiceOutcome; no BioskopError escapes
    - The gateway is injected at construction (no module-level store handle)
    - Update and delete check existence first, then trust the row count over
      that check: a row removed in between still yields 404
    - Delete captures the snapshot before the row is removed and echoes it
    - No state is kept between calls

Design Decisions:
    - Steps raise typed errors and one except clause per operation shapes them:
      each operation reads top to bottom as its happy path
    - Log level follows ErrorSeverity: 4xx at INFO, store failures at ERROR
      (cause already logged by the session manager with the driver message)
"""

import logging

from bioskop_api.core.domain_types import CinemaDraft
from bioskop_api.core.errors import (
    BioskopError, CinemaNotFoundError, CinemaValidationError, ErrorSeverity,
)
from bioskop_api.core.outcomes import ServiceOutcome
from bioskop_api.core.parse_identifiers import parse_cinema_id
from bioskop_api.core.repository_protocols import CinemaRepository
from bioskop_api.core.validate_cinema import Rejection, validate_cinema
from bioskop_api.schemas.cinema import decode_cinema_payload

logger = logging.getLogger(__name__)

MSG_CREATED = "cinema created"
MSG_LIST_EMPTY = "no cinema data yet"
MSG_FETCHED = "data retrieved"
MSG_UPDATED = "cinema updated"
MSG_DELETED = "cinema deleted"
MSG_NOTHING_UPDATED = "nothing updated"
MSG_NOTHING_DELETED = "nothing deleted"

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.INFO,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


class CinemaService:
    """Resource service for the cinema resource."""

    def __init__(self, gateway: CinemaRepository):
        self._gateway = gateway

    async def create(self, body: bytes | str) -> ServiceOutcome:
        try:
            draft = _accept(decode_cinema_payload(body))
            cinema_id = await self._gateway.insert(draft)
        except BioskopError as exc:
            return _failure("create", exc)
        logger.info(
            f"Created cinema {cinema_id}",
            extra={"cinema_id": cinema_id, "operation": "create"},
        )
        return ServiceOutcome.created(MSG_CREATED, draft.with_id(cinema_id))

    async def list_all(self) -> ServiceOutcome:
        try:
            cinemas = await self._gateway.list_all()
        except BioskopError as exc:
            return _failure("list", exc)
        if not cinemas:
            return ServiceOutcome.ok(MSG_LIST_EMPTY, [])
        return ServiceOutcome.ok(
            MSG_FETCHED,
            [c.model_dump() for c in cinemas],
            total=len(cinemas),
        )

    async def get(self, raw_id: str) -> ServiceOutcome:
        try:
            cinema_id = parse_cinema_id(raw_id)
            cinema = await self._gateway.get_by_id(cinema_id)
        except BioskopError as exc:
            return _failure("get", exc)
        return ServiceOutcome.ok(MSG_FETCHED, cinema.model_dump())

    async def update(self, raw_id: str, body: bytes | str) -> ServiceOutcome:
        try:
            cinema_id = parse_cinema_id(raw_id)
            draft = _accept(decode_cinema_payload(body))
            if not await self._gateway.exists_by_id(cinema_id):
                raise CinemaNotFoundError(cinema_id)
            affected = await self._gateway.update(cinema_id, draft)
            if affected == 0:
                raise CinemaNotFoundError(cinema_id, MSG_NOTHING_UPDATED)
        except BioskopError as exc:
            return _failure("update", exc)
        logger.info(
            f"Updated cinema {cinema_id}",
            extra={"cinema_id": cinema_id, "operation": "update"},
        )
        return ServiceOutcome.ok(MSG_UPDATED, draft.with_id(cinema_id))

    async def delete(self, raw_id: str) -> ServiceOutcome:
        try:
            cinema_id = parse_cinema_id(raw_id)
            snapshot = await self._gateway.get_by_id(cinema_id)
            affected = await self._gateway.delete_by_id(cinema_id)
            if affected == 0:
                raise CinemaNotFoundError(cinema_id, MSG_NOTHING_DELETED)
        except BioskopError as exc:
            return _failure("delete", exc)
        logger.info(
            f"Deleted cinema {cinema_id}",
            extra={"cinema_id": cinema_id, "operation": "delete"},
        )
        return ServiceOutcome.ok(MSG_DELETED, snapshot.model_dump())

    async def ready(self) -> bool:
        """Store reachability for the readiness probe."""
        return await self._gateway.ping()


def _accept(draft: CinemaDraft) -> CinemaDraft:
    """Run the validator; a Rejection becomes CinemaValidationError."""
    result = validate_cinema(draft)
    if isinstance(result, Rejection):
        raise CinemaValidationError(result.reason)
    return result


def _failure(operation: str, exc: BioskopError) -> ServiceOutcome:
    """Log and shape a failed operation at the error's severity."""
    extra = {
        "operation": operation,
        "error_code": exc.code,
        "status_code": exc.http_status,
        "cinema_id": exc.context.cinema_id,
    }
    verb = "failed" if exc.http_status >= 500 else "rejected"
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"Cinema {operation} {verb}: {exc.message}",
        extra=extra,
    )
    return ServiceOutcome.failure(exc)
