"""
Application entry point.

This module follows SRP by only serving as the application entry point.
All configuration, middleware, and lifecycle management is delegated
to specialized modules.
"""

import logging

import sentry_sdk

from clinic_booking.config.settings import get_settings
from clinic_booking.core.app_factory import create_app
from clinic_booking.core.shared import configure_logging

settings = get_settings()

configure_logging(
    level=settings.LOG_LEVEL,
    format_type=settings.LOG_FORMAT,
    log_file=settings.LOG_FILE,
)

logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        send_default_pii=False,
    )

# Create application using factory
app = create_app(settings)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "clinic_booking.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.DEBUG,
    )
