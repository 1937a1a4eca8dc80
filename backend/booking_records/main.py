"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from booking_records.config import get_settings
from booking_records.infrastructure.database import engine
from booking_records.infrastructure.database.bootstrap import initialize_client_store
from booking_records.infrastructure.database.session import (
    async_session_factory,
    database_location,
)
from booking_records.infrastructure.logging.log_config import setup_logging
from booking_records.presentation.api.errors import register_exception_handlers
from booking_records.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — initialize the client store, close it on shutdown."""
    settings = get_settings()
    setup_logging()

    # 1. Create the clients table and seed it when empty
    seeded = await initialize_client_store(
        engine,
        async_session_factory,
        seed=settings.seed_default_clients,
    )
    if seeded:
        logger.info("Default clients added successfully")
    logger.info(
        "%s v%s started — database: %s",
        settings.app_title,
        settings.app_version,
        database_location(settings.database_url),
    )

    yield

    # Shutdown: uvicorn has stopped accepting requests by now
    logger.info("Shutting down gracefully...")
    await engine.dispose()
    logger.info("Database connection closed.")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware (the booking form is served from another origin)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "booking_records.main:app",
        host=settings.host,
        port=settings.port,
    )
