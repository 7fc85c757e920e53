"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CinemaId wraps int — store-assigned, never taken from a request body
    - RATING_MIN/RATING_MAX bound the closed rating interval [0, 5]
    - CinemaDraft is the client-controlled part of a cinema (no id)

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - Frozen dataclasses for values: outcomes can echo them without defensive copies
"""

from dataclasses import asdict, dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CinemaId = NewType("CinemaId", int)


# ─── Value Bounds ────────────────────────────────────────────────

RATING_MIN = 0.0
RATING_MAX = 5.0


# ─── Values ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class CinemaDraft:
    """Candidate cinema fields as decoded from a request body."""
    name: str
    location: str
    rating: float

    def with_id(self, cinema_id: CinemaId) -> dict:
        """Wire representation of this draft once it has an identity."""
        return {"id": cinema_id, **asdict(self)}
