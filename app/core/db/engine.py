"""
Database Engine Configuration for FastAPI.

- Async operations via aiosqlite (SQLite) or any async driver for other URLs
- WAL mode and busy_timeout so concurrent dashboard reads never block each other
- One session per read operation via run_db(), so fan-out queries can run in parallel
"""

import logging
from pathlib import Path
from typing import Awaitable, Callable, TypeVar
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from app.core.config import config as settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _get_engine_options(database_url: str) -> dict:
    """
    Get engine options based on database type.
    SQLite requires special handling for async and concurrency.
    """
    is_sqlite = database_url.startswith("sqlite")

    options = {
        "echo": False,
    }

    if is_sqlite:
        # StaticPool shares a single connection, only usable for in-memory databases.
        # File databases get a fresh connection per session so reads run side by side.
        if ":memory:" in database_url:
            options["poolclass"] = StaticPool
            options["connect_args"] = {"check_same_thread": False}
        else:
            options["poolclass"] = NullPool
    else:
        options["pool_size"] = 10
        options["max_overflow"] = 20
        options["pool_pre_ping"] = True

    return options


def _configure_sqlite_connection(dbapi_connection, connection_record):
    """
    Configure SQLite connection for concurrent readers.
    Called on every new connection to the database.

    - WAL mode: readers do not block writers and vice versa
    - busy_timeout: wait up to 30s for locks instead of failing immediately
    - foreign_keys: enforce referential integrity
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=30000")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


database_url = settings.database_url

_sqlite_file = make_url(database_url).database if database_url.startswith("sqlite") else None
if _sqlite_file and _sqlite_file != ":memory:":
    # Ensure data directory exists
    Path(_sqlite_file).parent.mkdir(parents=True, exist_ok=True)

engine = create_async_engine(database_url, **_get_engine_options(database_url))

if database_url.startswith("sqlite"):
    # For aiosqlite, we need to use the sync_engine's pool events
    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        _configure_sqlite_connection(dbapi_connection, connection_record)


AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,  # Manual control over flushing
)


async def run_db(operation: Callable[[AsyncSession], Awaitable[T]]) -> T:
    """
    Run a read operation in its own session.

    An AsyncSession cannot serve two queries at once, so every operation that is
    meant to run concurrently with others gets a dedicated session (and pooled
    connection) here.
    """
    async with AsyncSessionLocal() as session:
        return await operation(session)


async def check_database_connection() -> bool:
    """
    Verify database connection is working.
    Used by the /health endpoint.
    """
    try:
        async with AsyncSessionLocal() as session:
            result = await session.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return False


async def init_models(drop: bool = False) -> None:
    """
    Create all tables from the ORM metadata (local bootstrap and tests).
    Production schemas are managed by Alembic.
    """
    from app.core.db.base import Base

    # Register every mapped class on Base.metadata
    import app.modules.users.models  # noqa: F401
    import app.modules.products.models  # noqa: F401
    import app.modules.orders.models  # noqa: F401

    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
