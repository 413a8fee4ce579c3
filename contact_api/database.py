"""Database engine, pooled session management and schema bootstrap."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from contact_api.config.settings import DatabaseConfig

# Import models so they are attached to Base.metadata before table creation
from contact_api.models import Base  # noqa: F401 - ensures metadata is registered

logger = logging.getLogger(__name__)


def _create_engine(config: DatabaseConfig, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine with a bounded connection pool."""

    engine_options: dict[str, Any] = {
        "echo": echo,
        "future": True,
        "pool_pre_ping": True,
    }

    if config.serverless:
        # Disable pooling when working with serverless databases.
        engine_options["poolclass"] = NullPool
    else:
        # Callers beyond the bound wait for a free connection instead of failing.
        engine_options["pool_size"] = config.pool_size
        engine_options["max_overflow"] = 0
        engine_options["pool_timeout"] = config.pool_timeout

    return create_async_engine(config.url, **engine_options)


class Database:
    """Owns the engine and hands out sessions for the lifetime of the process."""

    def __init__(self, config: DatabaseConfig, *, echo: bool = False) -> None:
        self.engine: AsyncEngine = _create_engine(config, echo=echo)
        self.session_factory = async_sessionmaker(
            self.engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Async context manager that yields a session bound to the pool."""

        async with self.session_factory() as session:
            yield session

    async def init_models(self) -> bool:
        """Create database tables if they do not exist.

        Failures are logged rather than raised so the HTTP surface still comes
        up; requests then fail with a store error until the database is
        reachable.
        """

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as exc:
            logger.error("Database schema bootstrap failed: %s", exc)
            return False

        logger.info("Ensured database tables %s.", ", ".join(Base.metadata.tables))
        return True

    async def ping(self) -> bool:
        """Return True when a trivial round trip to the database succeeds."""

        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.warning("Database ping failed", exc_info=True)
            return False
        return True

    async def dispose(self) -> None:
        """Dispose of the engine and release pooled connections."""

        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """Return the database collaborator attached to the running application."""

    return request.app.state.database


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency-compatible generator yielding a pooled session."""

    async with get_database(request).session() as session:
        yield session
