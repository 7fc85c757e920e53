"""Error Hierarchy — typed, categorized exceptions for every Bioskop failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the failure envelope: message, error, code (+ detail)
    - StoreFailureError messages are generic; the driver error lives only in __cause__

Design Decisions:
    - NotFound and StoreFailure are separate types, never one generic channel
    - Single hierarchy with BioskopError base: service and global handler catch all
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories; each maps to one response summary."""
    MALFORMED_INPUT = "malformed_input"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORE = "store"
    INTERNAL = "internal"


CATEGORY_SUMMARIES: dict[ErrorCategory, str] = {
    ErrorCategory.MALFORMED_INPUT: "invalid request",
    ErrorCategory.VALIDATION: "validation failed",
    ErrorCategory.RESOURCE_NOT_FOUND: "not found",
    ErrorCategory.STORE: "internal error",
    ErrorCategory.INTERNAL: "internal error",
}


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never rendered to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    cinema_id: int | None = None
    operation: str | None = None


class BioskopError(Exception):
    """Base exception for all Bioskop errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.detail = detail

    @property
    def summary(self) -> str:
        return CATEGORY_SUMMARIES[self.category]

    def to_response(self) -> dict:
        """Convert to the standardized failure body."""
        body = {
            "message": self.summary,
            "error": self.message,
            "code": self.code,
        }
        if self.detail:
            body["detail"] = self.detail
        return body


# ─── Request Errors (400/404) ───────────────────────────────────

class MalformedInputError(BioskopError):
    """Payload could not be decoded or identifier is not numeric."""
    def __init__(
        self, message: str, detail: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "MALFORMED_INPUT", ErrorCategory.MALFORMED_INPUT,
            ErrorSeverity.WARNING, context, 400, detail,
        )


class CinemaValidationError(BioskopError):
    """Decoded payload broke a field rule (empty text, rating out of range)."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            reason, "VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class CinemaNotFoundError(BioskopError):
    """No cinema row for the id, or a mutation touched zero rows."""
    def __init__(
        self,
        cinema_id: int,
        message: str = "cinema with that id was not found",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.cinema_id = cinema_id
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.cinema_id = cinema_id


# ─── Store Errors (500) ─────────────────────────────────────────

STORE_FAILURE_MESSAGES: dict[str, str] = {
    "insert": "failed to save data",
    "list": "failed to fetch data",
    "get": "failed to fetch data",
    "exists": "failed to check data",
    "update": "failed to update data",
    "delete": "failed to delete data",
}


class StoreFailureError(BioskopError):
    """Any lower-level store error: connectivity, constraint, timeout, driver."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            STORE_FAILURE_MESSAGES.get(operation, "database operation failed"),
            "STORE_FAILURE", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
