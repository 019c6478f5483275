# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.db import Database
from blog_api.main import app


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client wired to the in-memory store."""
    app.state.database = database
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides = {}
