# tests/main/conftest.py
"""Pytest configuration and fixtures for main tests."""

from collections.abc import AsyncGenerator

from httpx import ASGITransport, AsyncClient
from pytest import fixture

from blog_api.db import Database
from blog_api.main import app


@fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing FastAPI endpoints."""
    app.state.database = database
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
