"""
Alembic environment for the wholesale portal schema.

The database URL and SQLite pragmas come from the application itself
(app.core.config / app.core.db.engine), so migrations always target the same
database file the API serves from.
"""

import asyncio
from logging.config import fileConfig
from sqlalchemy import pool, event
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine
from alembic import context

from app.core.db.base import Base
from app.core.db.engine import _configure_sqlite_connection, database_url

# Register every mapped class on Base.metadata
import app.modules.users.models  # noqa: F401
import app.modules.products.models  # noqa: F401
import app.modules.orders.models  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", database_url)

is_sqlite = database_url.startswith("sqlite")

if config.config_file_name is not None:
    # Keep the application's loggers alive when migrations run in-process
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit migration SQL without connecting to the database."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    # SQLite cannot ALTER most columns; batch mode recreates the table instead
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=is_sqlite,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    connectable = create_async_engine(database_url, poolclass=pool.NullPool)

    if is_sqlite:
        event.listen(connectable.sync_engine, "connect", _configure_sqlite_connection)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
