"""Cinema Validation — field rules applied before any store operation.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Rules run in order and the first failure wins
    - No normalization: no trimming, no case folding, no clamping

Design Decisions:
    - Return Rejection (not raise): the service decides how a rejection is surfaced,
      and tests assert on plain values without pytest.raises
    - name and location share one reason: both are reported under one condition
"""

import math
from dataclasses import dataclass

from bioskop_api.core.domain_types import CinemaDraft, RATING_MIN, RATING_MAX

REQUIRED_FIELDS_REASON = "name and location required"
RATING_RANGE_REASON = "rating out of range"


@dataclass(frozen=True)
class Rejection:
    """Structured validation failure."""
    reason: str
    field: str


def check_required_text(draft: CinemaDraft) -> Rejection | None:
    """Rules 1-2: name and location must be non-empty strings."""
    if draft.name == "":
        return Rejection(REQUIRED_FIELDS_REASON, "name")
    if draft.location == "":
        return Rejection(REQUIRED_FIELDS_REASON, "location")
    return None


def check_rating_range(draft: CinemaDraft) -> Rejection | None:
    """Rule 3: rating within [0, 5] inclusive; NaN and inf are out of range."""
    rating = draft.rating
    if not math.isfinite(rating) or not (RATING_MIN <= rating <= RATING_MAX):
        return Rejection(RATING_RANGE_REASON, "rating")
    return None


def validate_cinema(draft: CinemaDraft) -> CinemaDraft | Rejection:
    """Chain all field rules. Returns the accepted draft or the first Rejection."""
    return (
        check_required_text(draft)
        or check_rating_range(draft)
        or draft
    )
