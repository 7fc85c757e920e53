"""Cinema Schemas — Pydantic models for the request and response boundary.

Invariants:
    - CinemaPayload decodes strictly: a string rating or numeric name is malformed
    - Missing fields decode to zero values ("" / 0.0); the validator rejects them later
    - Unknown keys (including "id") are ignored — the store assigns ids
    - CinemaRead mirrors a stored row with public field names

Design Decisions:
    - Decoding lives here, validation rules live in core/validate_cinema.py:
      "could not parse" and "parsed but invalid" are different errors
    - "nama"/"lokasi" accepted as aliases for the table's column-style keys
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from bioskop_api.core.domain_types import CinemaDraft
from bioskop_api.core.errors import MalformedInputError

INVALID_JSON = "invalid JSON format"


class CinemaPayload(BaseModel):
    """Inbound body for create and update."""
    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field("", validation_alias=AliasChoices("name", "nama"))
    location: str = Field("", validation_alias=AliasChoices("location", "lokasi"))
    rating: float = 0.0

    def to_draft(self) -> CinemaDraft:
        return CinemaDraft(
            name=self.name, location=self.location, rating=self.rating,
        )


class CinemaRead(BaseModel):
    """Outbound cinema record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    rating: float


def decode_cinema_payload(body: bytes | str) -> CinemaDraft:
    """Decode a raw JSON body into a draft, or raise MalformedInputError."""
    try:
        payload = CinemaPayload.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedInputError(
            INVALID_JSON, detail=_describe_errors(exc),
        ) from exc
    return payload.to_draft()


def _describe_errors(exc: ValidationError) -> str:
    """Flatten pydantic errors into one line: 'field: message; ...'."""
    parts = []
    for e in exc.errors(include_url=False):
        field = ".".join(str(loc) for loc in e["loc"])
        parts.append(f"{field}: {e['msg']}" if field else e["msg"])
    return "; ".join(parts)
