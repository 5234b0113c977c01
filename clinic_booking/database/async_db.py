"""
Async database access

The Database object owns the engine and the session factory. It is created
by the application factory and lives on ``app.state``; nothing here is a
module-level singleton.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from clinic_booking.config.settings import Settings
from clinic_booking.database.base import Base

logger = logging.getLogger(__name__)


def build_engine_config(settings: Settings, url: str) -> dict[str, Any]:
    """Configuración del engine según el entorno y el driver"""
    base_config: dict[str, Any] = {"echo": settings.DB_ECHO}

    if url.startswith("sqlite"):
        # aiosqlite no soporta pool_size / max_overflow
        return base_config

    base_config["pool_pre_ping"] = True
    if settings.DEBUG:
        logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
        return {**base_config, "poolclass": NullPool}

    logger.info("Creating async database engine for PRODUCTION (pooled)")
    return {
        **base_config,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
    }


class Database:
    """Engine + session factory pair for one database."""

    def __init__(self, url: str, **engine_config: Any):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_config)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        url = settings.async_database_url
        return cls(url, **build_engine_config(settings, url))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Sesión de base de datos. El commit/rollback lo decide el repositorio
        (ver ``transaction()``); aquí sólo se garantiza el cierre.
        """
        async with self.session_factory() as session:
            yield session

    async def create_all(self) -> None:
        # Registers the scheduling tables on Base.metadata
        from clinic_booking.domains.scheduling.infrastructure.persistence.sqlalchemy import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
