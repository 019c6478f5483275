"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blog_api.configs import Settings, file_logger
from blog_api.errors.base import BaseAppError
from blog_api.errors.database import DatabaseConfigurationError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def engine_options(url: str, settings: Settings | None = None) -> dict[str, Any]:
    """
    Build `create_async_engine` keyword arguments for the given URL.

    SQLite (used for local runs and tests) shares one connection so in-memory
    databases survive across sessions; PostgreSQL gets a tuned pool and
    server-side statement timeouts.
    """
    if url.startswith("sqlite"):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }

    options: dict[str, Any] = {"pool_pre_ping": True}
    if settings is not None:
        options.update(
            pool_size=settings.POOL_SIZE,
            max_overflow=settings.MAX_OVERFLOW,
            pool_timeout=settings.POOL_TIMEOUT,
            pool_recycle=settings.POOL_RECYCLE,
        )
    if url.startswith("postgresql+asyncpg"):
        options["connect_args"] = {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        }
    return options


class Database:
    """
    Process-scoped store handle.

    Owns the async engine and the session factory. One instance is created at
    startup, kept on ``app.state.database`` and handed to request handlers
    through `get_session`.
    """

    def __init__(self, url: str, *, echo: bool = False, settings: Settings | None = None) -> None:
        self.url = url
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            **engine_options(url, settings),
        )
        self.session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
            self.engine,
            class_=SQLModelAsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """
        Create the handle from application settings.

        Raises:
            DatabaseConfigurationError: If ``DATABASE_URL`` is not set.
        """
        if not settings.DATABASE_URL:
            raise DatabaseConfigurationError

        database = cls(settings.DATABASE_URL, echo=settings.DATABASE_ECHO, settings=settings)
        if settings.DEBUG:
            _configure_engine_events(database.engine)
        return database

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for explicit transaction management.

        Yields:
            AsyncSession: Session that commits on clean exit and rolls back on error.

        Example:
            ```python
            async with database.transaction() as session:
                session.add(BlogPostDB(...))
            ```
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except BaseAppError:
                await session.rollback()
                raise
            except Exception:
                await session.rollback()
                logger.exception("Transaction error")
                raise

    async def create_all(self) -> None:
        """
        Create all tables defined in SQLModel models.

        Note:
            Development convenience; production schemas are managed by Alembic.
        """
        async with self.engine.begin() as conn:
            # Import all models to ensure they are registered
            from blog_api.models import BlogPostDB  # noqa: F401, PLC0415

            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully!")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")


async def get_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    The session comes from the `Database` stored on the application state
    during startup.

    Yields:
        AsyncSession: Database session
    """
    database: Database = request.app.state.database
    async with database.transaction() as session:
        yield session
