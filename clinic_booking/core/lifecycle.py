"""
Application lifecycle management using modern FastAPI lifespan pattern.

This module follows SRP by handling only application startup/shutdown logic.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from clinic_booking.config.settings import Settings
from clinic_booking.database import Database

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown of the database
    owned by the application.
    """

    def __init__(self, settings: Settings, database: Database) -> None:
        self._settings = settings
        self._database = database
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")
        self._verify_configurations()

        if self._settings.DB_CREATE_TABLES:
            await self._database.create_all()
            logger.info("Database tables created (DB_CREATE_TABLES=True)")

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await self._database.dispose()
        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        """Verify critical application configurations."""
        if not self._settings.SENTRY_DSN:
            logger.info("SENTRY_DSN not configured - error tracking disabled")
        if self._settings.DB_CREATE_TABLES and not self._settings.is_development:
            logger.warning("DB_CREATE_TABLES is enabled outside development; prefer alembic migrations")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
        app.state.lifecycle = LifecycleManager(settings, database)
    """
    lifecycle: LifecycleManager = app.state.lifecycle

    await lifecycle.startup()

    yield  # Application runs here

    await lifecycle.shutdown()
