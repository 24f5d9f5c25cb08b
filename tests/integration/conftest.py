"""Fixtures for tests against a real SQLite database via aiosqlite."""

from collections.abc import AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pkgledger.config import DatabaseConfig
from pkgledger.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
    ensure_schema,
)


@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))
    await ensure_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session
