"""
Alembic environment for the blog posts schema.

The target URL comes from ``DATABASE_URL`` (normalized by `Settings`), or from
``alembic -x database_url=...`` for one-off runs against another store.
SQLite targets are migrated in batch mode since SQLite cannot alter columns
in place.
"""

from asyncio import run as asyncio_run
from logging.config import fileConfig
from typing import Any

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config
from sqlmodel import SQLModel

from alembic import context
from blog_api.configs import settings
from blog_api.errors import DatabaseConfigurationError

# Registers blog_posts on SQLModel.metadata for autogenerate
from blog_api.models import BlogPostDB  # noqa: F401

config = context.config

x_args = context.get_x_argument(as_dictionary=True)
database_url = x_args.get("database_url") or settings.DATABASE_URL
if not database_url:
    raise DatabaseConfigurationError

config.set_main_option("sqlalchemy.url", database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata


def context_options() -> dict[str, Any]:
    """Options shared by offline and online runs."""
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "compare_server_default": True,
        "render_as_batch": database_url.startswith("sqlite"),
    }


def run_migrations_offline() -> None:
    """Emit the migration SQL to stdout without connecting."""
    context.configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **context_options(),
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, **context_options())

    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply migrations through an async engine on the application's URL."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio_run(run_migrations_online())
