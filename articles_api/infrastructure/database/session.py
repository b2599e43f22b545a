"""SQLAlchemy engine and session lifecycle.

A ``Database`` is opened once at application start-up and disposed on
shutdown (see ``articles_api.main.lifespan``); nothing here is created at
import time.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from articles_api.config import Settings
from articles_api.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine and the session factory for one application."""

    def __init__(self, settings: Settings):
        url = settings.async_database_url
        engine_kwargs: dict = {"echo": settings.sql_echo}

        if str(url).startswith("sqlite+aiosqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in str(url):
                # One shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        elif str(url).startswith("postgresql+asyncpg"):
            engine_kwargs["connect_args"] = {"ssl": settings.db_ssl}

        self.engine = create_async_engine(url, **engine_kwargs)
        if str(url).startswith("sqlite+aiosqlite"):
            event.listen(self.engine.sync_engine, "connect", _register_unicode_lower)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_tables(self) -> None:
        """Create the ``articles`` table if it does not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.debug("Database tables ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.debug("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session that commits on success and rolls back on error."""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


def _register_unicode_lower(dbapi_connection, connection_record) -> None:
    """Replace SQLite's ASCII-only ``lower()`` with Python's Unicode ``str.lower``."""
    dbapi_connection.create_function("lower", 1, _unicode_lower)


def _unicode_lower(value: str | None) -> str | None:
    return value.lower() if isinstance(value, str) else value
