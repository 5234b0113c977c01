"""
Application factory for FastAPI.

This module follows SRP by handling only FastAPI application creation and configuration.
The factory is the composition root: it builds the Database and the
SchedulingContainer and hangs them on ``app.state``.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clinic_booking.api.exception_handlers import register_exception_handlers
from clinic_booking.api.middleware import RequestLoggingMiddleware
from clinic_booking.api.router import api_router
from clinic_booking.config.settings import Settings, get_settings
from clinic_booking.core.container import SchedulingContainer
from clinic_booking.core.lifecycle import LifecycleManager, lifespan
from clinic_booking.database import Database

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Separates application creation from configuration details.
    Each configuration step is handled by a dedicated method.
    """

    def __init__(self, settings: Settings | None = None, database: Database | None = None) -> None:
        """
        Initialize app factory.

        Args:
            settings: Application settings (uses default if not provided)
            database: Pre-built database (built from settings if not provided)
        """
        self._settings = settings or get_settings()
        self._database = database

    def create_app(self) -> FastAPI:
        """
        Create and configure the FastAPI application.

        Returns:
            Configured FastAPI application instance.
        """
        app = self._create_base_app()

        self._configure_state(app)
        self._configure_middleware(app)
        self._configure_exception_handlers(app)
        self._configure_routes(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _create_base_app(self) -> FastAPI:
        """Create the base FastAPI application with lifespan."""
        return FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=f"{self._settings.API_V1_STR}/docs" if self._settings.DEBUG else None,
            redoc_url=f"{self._settings.API_V1_STR}/redoc" if self._settings.DEBUG else None,
            lifespan=lifespan,
        )

    def _configure_state(self, app: FastAPI) -> None:
        """Attach settings, database and containers to the application."""
        database = self._database or Database.from_settings(self._settings)
        app.state.settings = self._settings
        app.state.database = database
        app.state.container = SchedulingContainer(self._settings)
        app.state.lifecycle = LifecycleManager(self._settings, database)

    def _configure_middleware(self, app: FastAPI) -> None:
        """
        Configure application middleware.

        Middleware order matters:
        1. CORS (outermost)
        2. Request logging
        """
        app.add_middleware(RequestLoggingMiddleware)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origin_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        logger.info("Middleware configured")

    def _configure_exception_handlers(self, app: FastAPI) -> None:
        """Register exception handlers."""
        register_exception_handlers(app)

    def _configure_routes(self, app: FastAPI) -> None:
        """Configure API routes."""
        app.include_router(api_router, prefix=self._settings.API_V1_STR)

        logger.info("Routes configured")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        """Add health check endpoint."""

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            """
            Verify application health status.

            Returns basic status and environment information.
            """
            return {
                "status": "ok",
                "environment": self._settings.ENVIRONMENT,
            }


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Create FastAPI application using the factory.

    This is the main entry point for application creation.

    Args:
        settings: Optional settings override
        database: Optional database override (tests)

    Returns:
        Configured FastAPI application
    """
    factory = AppFactory(settings, database)
    return factory.create_app()
