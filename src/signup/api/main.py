"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import AsyncConnectionPool

from signup.adapters.i18n.catalog import JsonTranslationCatalog
from signup.adapters.repository.memory import InMemoryUserRepository
from signup.adapters.repository.postgres import PostgresUserRepository, run_migrations
from signup.api.v1 import router as v1_router
from signup.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "User Registration API v1 - Validate and create user accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Loads translation tables
    - Creates the repository (database pool + migrations for postgres)
    - Closes connection pool on shutdown
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    logger.info("Starting application...")
    if settings.locales_dir is not None:
        app.state.translator = JsonTranslationCatalog.from_directory(
            settings.locales_dir, settings.default_locale
        )
    else:
        app.state.translator = JsonTranslationCatalog.bundled(settings.default_locale)

    pool = None
    if settings.repository_backend == "memory":
        logger.warning("Using in-memory repository; accounts are lost on restart")
        app.state.repository = InMemoryUserRepository()
    else:
        logger.info("Connecting to database...")
        pool = AsyncConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=False,
        )
        await pool.open()

        logger.info("Running database migrations...")
        await run_migrations(pool)

        app.state.repository = PostgresUserRepository(pool)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        await pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="signup",
    description="User Registration API - Ordered field validation with localized error reports",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/api/1.0")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with repository validation.

    Returns 200 OK if application and storage are healthy.
    Raises exception if the database connection fails.
    """
    await request.app.state.repository.ping()
    return {"status": "healthy"}
