"""Boundary Protocols — contracts between the Resource Service and the store.

Invariants:
    - The service never imports SQLAlchemy — it sees only this Protocol
    - get_by_id raises CinemaNotFoundError on zero rows (never returns None)
    - Every method raises StoreFailureError on any store-level failure
    - update/delete return rows affected; 0 is meaningful to the caller

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance
    - Async in Protocol: implementations do IO over a pooled engine
"""

from typing import Protocol

from bioskop_api.core.domain_types import CinemaDraft, CinemaId
from bioskop_api.schemas.cinema import CinemaRead


class CinemaRepository(Protocol):
    """Contract for cinema persistence — implemented by infrastructure."""
    async def insert(self, draft: CinemaDraft) -> CinemaId: ...
    async def list_all(self) -> list[CinemaRead]: ...
    async def get_by_id(self, cinema_id: CinemaId) -> CinemaRead: ...
    async def exists_by_id(self, cinema_id: CinemaId) -> bool: ...
    async def update(self, cinema_id: CinemaId, draft: CinemaDraft) -> int: ...
    async def delete_by_id(self, cinema_id: CinemaId) -> int: ...
    async def ping(self) -> bool: ...
