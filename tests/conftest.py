"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from voyena.db.schema import init_schema
from voyena.db.session import Store, get_db
from voyena.main import app


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "voyena.db"


@pytest.fixture
async def store(database_path: Path) -> AsyncGenerator[Store, None]:
    """A fresh SQLite store with the schema applied."""
    test_store = Store(f"sqlite+aiosqlite:///{database_path}")
    await init_schema(test_store.engine, database_path)
    yield test_store
    await test_store.dispose()


@pytest.fixture
async def db(store: Store) -> AsyncGenerator[AsyncSession, None]:
    """Session for calling services directly."""
    async with store.sessionmaker() as session:
        yield session


@pytest.fixture
async def client(store: Store) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing FastAPI endpoints against the test store."""

    async def _get_test_db() -> AsyncGenerator[AsyncSession, None]:
        async with store.session() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
