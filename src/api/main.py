"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures logging, routes, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.api.v1 import router as v1_router
from src.config.logging import configure_logging
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Signup API v1 - Submit user records with validated username and email",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Configures logging on startup and logs shutdown. The application holds
    no connections or other resources.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


def create_app() -> FastAPI:
    """Build the FastAPI application with all routes mounted."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Signup API - Accepts user records only when username and email validate",
        version=settings.app_version,
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    app.include_router(v1_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
