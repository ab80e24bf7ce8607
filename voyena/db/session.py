"""Database session management."""

import asyncio
import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from voyena.config import get_settings

logger = logging.getLogger(__name__)


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine for a SQLite file.

    StaticPool keeps exactly one connection open for the life of the engine,
    and every new DBAPI connection gets foreign keys switched on so that
    ON DELETE CASCADE / SET NULL rules are honoured.
    """
    engine = create_async_engine(
        url,
        echo=echo,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


class Store:
    """
    The single handle to the SQLite store.

    Every operation runs inside ``session()``, which holds an exclusive lock
    for its whole duration so only one logical operation touches the store
    at a time.
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.engine = build_engine(url, echo=echo)
        self.sessionmaker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Exclusive session: commit on success, roll back and re-raise on error."""
        async with self._lock:
            async with self.sessionmaker() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    logger.debug("Rolling back store session")
                    await session.rollback()
                    raise

    async def dispose(self) -> None:
        await self.engine.dispose()


settings = get_settings()

store = Store(settings.database_url, echo=settings.debug)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with store.session() as session:
        yield session
