# blog_api/middleware/middleware.py
"""
Middleware components for the blog posts API.

This module contains the logging configuration, request logging middleware,
CORS handling and the lifespan event handler that opens and closes the
store connection.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import basicConfig, getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from blog_api.configs import file_logger, settings
from blog_api.db import Database
from blog_api.errors import DatabaseConfigurationError, DatabaseInitializationError
from blog_api.utils.helpers import get_summary, host

# --- Logging Configuration ---
basicConfig(
    level=settings.LOG_LEVEL,
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = file_logger(getLogger("blog_api"))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Open the store handle on startup and close it on shutdown.

    A missing ``DATABASE_URL`` aborts startup, so the server never accepts
    requests without a store.
    """
    # Startup
    logger.info(f"Starting {app.title}...")

    try:
        database = Database.from_settings(settings)
    except DatabaseConfigurationError:
        logger.critical("DATABASE_URL not defined in environment variables!")
        raise

    try:
        await database.create_all()
    except Exception as e:
        logger.exception("Database connection error")
        await database.dispose()
        raise DatabaseInitializationError from e

    app.state.database = database
    logger.info("Database connected")

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")
    await database.dispose()


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allow_all = "*" in settings.CORS_ORIGINS

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        # Browsers refuse credentials with a wildcard origin
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

        return response
