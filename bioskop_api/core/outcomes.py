"""Service Outcomes — the status code and JSON body of one service operation.

Invariants:
    - Every success body has "message"; "data" whenever a record or collection applies
    - Every failure body comes from BioskopError.to_response()
    - Outcomes are plain values: no framework types, the API layer encodes them
"""

from dataclasses import dataclass, field
from typing import Any

from bioskop_api.core.errors import BioskopError


@dataclass(frozen=True)
class ServiceOutcome:
    """HTTP-level result of a Resource Service operation."""
    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, data: Any, **extra: Any) -> "ServiceOutcome":
        return cls(200, {"message": message, **extra, "data": data})

    @classmethod
    def created(cls, message: str, data: Any) -> "ServiceOutcome":
        return cls(201, {"message": message, "data": data})

    @classmethod
    def failure(cls, exc: BioskopError) -> "ServiceOutcome":
        return cls(exc.http_status, exc.to_response())
