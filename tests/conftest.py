"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the bioskop table
    - get_cinema_service dependency overridden to use the test service
    - No test touches a real PostgreSQL server

Design Decisions:
    - SQLite in-memory + StaticPool: one connection shared by the whole test, so the
      table created by create_all is the one the gateway queries
"""

import os

# Import-time app construction reads settings; keep them local and quiet
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from bioskop_api.api.deps import get_cinema_service  # noqa: E402
from bioskop_api.db.base import Base  # noqa: E402
from bioskop_api.infrastructure.cinema_gateway import CinemaGateway  # noqa: E402
from bioskop_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from bioskop_api.main import app  # noqa: E402
from bioskop_api.services.cinema_service import CinemaService  # noqa: E402
import bioskop_api.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://", poolclass=StaticPool, echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def gateway(db_manager):
    return CinemaGateway(db_manager)


@pytest.fixture
def cinema_service(gateway):
    return CinemaService(gateway)


@pytest.fixture
async def drop_table(test_engine):
    """Call to remove the bioskop table mid-test (simulates a broken store)."""
    async def _drop():
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    return _drop


@pytest.fixture
async def client(cinema_service):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_cinema_service] = lambda: cinema_service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
