"""Neo Organizations API application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .__version__ import __version__
from .api import register_exception_handlers
from .config.settings import Settings, get_settings
from .database.connection import (
    DatabaseManager,
    close_database,
    get_database,
    init_database,
    set_database,
)
from .features.organizations import organization_router
from .models.base import HealthCheckResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the connection pool on startup and close it on shutdown."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version} ({settings.environment})")

    set_database(DatabaseManager(settings))
    await init_database()

    yield

    await close_database()
    logger.info(f"{settings.app_name} stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the Neo Organizations API.

    Args:
        settings: Settings to use (defaults to the cached settings)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Organization management API",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, debug=settings.debug)

    app.include_router(organization_router, prefix=settings.api_prefix)

    @app.get("/health", response_model=HealthCheckResponse, tags=["System"])
    async def health() -> HealthCheckResponse:
        healthy = await get_database().health_check()
        return HealthCheckResponse(
            status="healthy" if healthy else "degraded",
            database="connected" if healthy else "unavailable",
            version=__version__,
        )

    logger.info("Created Neo Organizations API")
    return app
