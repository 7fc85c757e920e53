"""Identifier Parsing — turns a raw path segment into a CinemaId.

Invariants:
    - Accepts an optional sign followed by ASCII digits, nothing else
    - Result fits a signed 64-bit integer; larger values are non-numeric
    - Raises MalformedInputError("id must be numeric") on any other input
"""

import re

from bioskop_api.core.domain_types import CinemaId
from bioskop_api.core.errors import MalformedInputError

ID_NOT_NUMERIC = "id must be numeric"

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_cinema_id(raw: str) -> CinemaId:
    """Parse a path identifier or raise MalformedInputError."""
    if not _DECIMAL.fullmatch(raw):
        raise MalformedInputError(ID_NOT_NUMERIC)
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise MalformedInputError(ID_NOT_NUMERIC)
    return CinemaId(value)
