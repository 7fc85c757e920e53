"""Error Handlers — global exception handlers for the Bioskop API.

Invariants:
    - BioskopError → its own http_status and to_response() body
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BioskopError), validation (Pydantic), catch-all (Exception)
    - The service already shapes its own failures; these handlers cover errors
      raised outside it (dependencies, framework, bugs)
    - Cinema routes take raw path and body strings, so RequestValidationError
      never fires for them; the handler keeps any typed route added later
      (query params, pydantic bodies) on the MALFORMED_INPUT envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from bioskop_api.core.errors import BioskopError, CATEGORY_SUMMARIES, ErrorCategory

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bioskop_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_bioskop_error_handler(app: FastAPI) -> None:
    """Register domain/store error handler."""

    @app.exception_handler(BioskopError)
    async def bioskop_error_handler(request: Request, exc: BioskopError):
        """Handle Bioskop errors raised outside the service."""
        logger.error(
            f"BioskopError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": CATEGORY_SUMMARIES[ErrorCategory.INTERNAL],
                "error": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "message": CATEGORY_SUMMARIES[ErrorCategory.MALFORMED_INPUT],
        "error": "Invalid request data",
        "code": "MALFORMED_INPUT",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
