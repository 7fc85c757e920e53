"""Bioskop API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BioskopError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database connectivity verified once on startup; failure aborts startup
    - The session manager and service live on app.state, owned by the lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) factory: tests build apps against their own settings
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bioskop_api.api.error_handlers import register_error_handlers
from bioskop_api.api.routes import cinemas, health
from bioskop_api.config import Settings, get_settings
from bioskop_api.infrastructure.cinema_gateway import CinemaGateway
from bioskop_api.infrastructure.database import DatabaseSessionManager
from bioskop_api.infrastructure.observability import setup_logging
from bioskop_api.services.cinema_service import CinemaService

logger = logging.getLogger(__name__)


class StoreUnavailableError(RuntimeError):
    """Startup connectivity check failed."""


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application: lifespan, middleware, routes, error handlers."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            pool_timeout=settings.database_pool_timeout_seconds,
            command_timeout=settings.database_command_timeout_seconds,
        )
        if not await db_manager.health_check():
            await db_manager.dispose()
            logger.critical("Database unreachable, refusing to start")
            raise StoreUnavailableError("database connectivity check failed")
        logger.info("Database connection verified")

        app.state.db_manager = db_manager
        app.state.cinema_service = CinemaService(CinemaGateway(db_manager))
        logger.info("Bioskop API started")
        yield
        logger.info("Bioskop API shutting down")
        await db_manager.dispose()

    app = FastAPI(
        title=settings.api_title, version=settings.api_version, lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(cinemas.router)

    register_error_handlers(app)
    return app


app = create_app()
