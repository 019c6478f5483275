# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os
from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest

# Must happen before settings are imported anywhere
os.environ["LOG_TO_FILE"] = "false"

from blog_api.db import Database  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def database() -> AsyncGenerator[Database]:
    """Fresh in-memory store with the schema created."""
    db = Database(TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def post_payload() -> Callable[..., dict[str, Any]]:
    """Factory for valid create payloads; keyword arguments override fields."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "title": "Hello World",
            "author": "Jane Doe",
            "image": "/images/hello.jpg",
            "summary": "A first post",
            "content": "Welcome to the blog.",
        }
        payload.update(overrides)
        return payload

    return _make
