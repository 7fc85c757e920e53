"""Cinema Gateway — parameterized statements against the `bioskop` table.

Invariants:
    - One session per call: concurrent requests never share a connection
    - Every statement binds its values (no string-built SQL)
    - get_by_id raises CinemaNotFoundError on zero rows, distinct from StoreFailureError
    - update/delete report rowcount and leave the "0 rows" decision to the caller
    - Mutations commit inside the session scope; failures roll back

Design Decisions:
    - SQLAlchemy Core-style statements over ORM unit-of-work: each verb is
      exactly one statement, so rowcount is the store's own answer
"""

import logging

from sqlalchemy import delete, exists, insert, select, update

from bioskop_api.core.domain_types import CinemaDraft, CinemaId
from bioskop_api.core.errors import CinemaNotFoundError
from bioskop_api.infrastructure.database import DatabaseSessionManager
from bioskop_api.models.cinema import Cinema
from bioskop_api.schemas.cinema import CinemaRead

logger = logging.getLogger(__name__)


class CinemaGateway:
    """Storage gateway for cinema rows over a pooled session manager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def insert(self, draft: CinemaDraft) -> CinemaId:
        """INSERT ... RETURNING id."""
        stmt = (
            insert(Cinema)
            .values(_row_values(draft))
            .returning(Cinema.id)
        )
        async with self._db.session("insert") as db:
            result = await db.execute(stmt)
            new_id = result.scalar_one()
            await db.commit()
        return CinemaId(new_id)

    async def list_all(self) -> list[CinemaRead]:
        """All rows ordered by id ascending."""
        async with self._db.session("list") as db:
            result = await db.execute(select(Cinema).order_by(Cinema.id))
            rows = result.scalars().all()
        return [CinemaRead.model_validate(row) for row in rows]

    async def get_by_id(self, cinema_id: CinemaId) -> CinemaRead:
        async with self._db.session("get") as db:
            result = await db.execute(
                select(Cinema).where(Cinema.id == cinema_id),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise CinemaNotFoundError(cinema_id)
        return CinemaRead.model_validate(row)

    async def exists_by_id(self, cinema_id: CinemaId) -> bool:
        """SELECT EXISTS(SELECT 1 FROM bioskop WHERE id = :id)."""
        async with self._db.session("exists") as db:
            result = await db.execute(
                select(exists().where(Cinema.id == cinema_id)),
            )
            return bool(result.scalar())

    async def update(self, cinema_id: CinemaId, draft: CinemaDraft) -> int:
        """Overwrite all mutable fields; returns rows affected."""
        stmt = (
            update(Cinema)
            .where(Cinema.id == cinema_id)
            .values(_row_values(draft))
            .execution_options(synchronize_session=False)
        )
        async with self._db.session("update") as db:
            result = await db.execute(stmt)
            affected = result.rowcount
            await db.commit()
        return affected

    async def delete_by_id(self, cinema_id: CinemaId) -> int:
        """Returns rows affected."""
        stmt = (
            delete(Cinema)
            .where(Cinema.id == cinema_id)
            .execution_options(synchronize_session=False)
        )
        async with self._db.session("delete") as db:
            result = await db.execute(stmt)
            affected = result.rowcount
            await db.commit()
        return affected

    async def ping(self) -> bool:
        return await self._db.health_check()


def _row_values(draft: CinemaDraft) -> dict:
    """Keyed by mapped attribute so the nama/lokasi column names resolve."""
    return {
        Cinema.name: draft.name,
        Cinema.location: draft.location,
        Cinema.rating: draft.rating,
    }
