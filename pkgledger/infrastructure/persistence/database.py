"""Database engine and session factory creation."""

import logging
import os
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from pkgledger.config import DatabaseConfig
from pkgledger.domain.shared.error import ConfigurationError
from pkgledger.infrastructure.persistence.tables import metadata

logger = logging.getLogger(__name__)

SQLITE_LOCK_TIMEOUT = 30


def _expand_sqlite_path(url: str) -> str:
    """Expand ~ in SQLite URLs and ensure parent directory exists."""
    if not url.startswith("sqlite") or url.endswith(":memory:"):
        return url

    # Extract path from URL (sqlite+aiosqlite:///path or sqlite:///path)
    prefix_end = url.index("///") + 3
    prefix = url[:prefix_end]
    path = url[prefix_end:]

    # Expand ~ and make absolute
    abs_path = os.path.abspath(os.path.expanduser(path))

    # Ensure parent directory exists
    Path(abs_path).parent.mkdir(parents=True, exist_ok=True)

    return f"{prefix}{abs_path}"


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    """Create async database engine.

    Handles SQLite and PostgreSQL with appropriate settings.
    """
    if not config.url:
        raise ConfigurationError("database.url is empty; set PKGLEDGER_DATABASE__URL")
    url = _expand_sqlite_path(config.url)

    if url.startswith("sqlite") and url.endswith(":memory:"):
        engine_kwargs: dict[str, Any] = {
            "echo": config.echo,
            # An in-memory database exists only on its one connection
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    elif url.startswith("sqlite"):
        engine_kwargs = {
            "echo": config.echo,
            # Seconds a writer waits on another unit of work holding the lock
            "connect_args": {"timeout": SQLITE_LOCK_TIMEOUT},
        }
    else:
        engine_kwargs = {
            "echo": config.echo,
            "pool_pre_ping": True,
            "pool_size": 5,
            "max_overflow": 10,
        }

    engine = create_async_engine(url, **engine_kwargs)
    if url.startswith("sqlite"):
        _emit_explicit_begin(engine, immediate=not url.endswith(":memory:"))
    return engine


def _emit_explicit_begin(engine: AsyncEngine, immediate: bool) -> None:
    """Let SQLAlchemy own transaction boundaries on SQLite.

    The sqlite3 driver defers BEGIN until the first DML statement, so a
    SAVEPOINT issued first would open (and its RELEASE would commit) the
    outer transaction.

    With ``immediate`` every transaction takes the write lock up front. Units
    of work on a shared file then run one after another, so the vacancy check
    in publish and the insert that follows it see the same state.
    """
    begin = "BEGIN IMMEDIATE" if immediate else "BEGIN"

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _begin(conn):
        conn.exec_driver_sql(begin)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory for dependency injection."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def ensure_schema(engine: AsyncEngine) -> None:
    """Create any missing tables."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.debug("Database schema ensured: %s", engine.url.render_as_string(hide_password=True))
