"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance
and manages lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.adapters.directory.memory import InMemoryUserDirectory
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration API v1 - Register users and send welcome emails",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Creates the user directory on startup and stores it in app state.
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info(
        "Allowed domain: %s, daily limit: %d",
        settings.allowed_domain,
        settings.daily_registration_limit,
    )

    app.state.user_directory = InMemoryUserDirectory()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    logger.info("Dropping %d in-memory registration(s)", len(app.state.user_directory))


app = FastAPI(
    title="welcome-gate",
    description="Registration API - Domain-gated, quota-limited sign-up with welcome emails",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Returns 200 OK if the application is up."""
    return {"status": "healthy"}
