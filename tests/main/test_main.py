# tests/main/test_main.py
"""Tests for application startup and shutdown."""

import inspect

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

import blog_api.main as app_module
from blog_api.configs import Settings
from blog_api.db import Database
from blog_api.errors import DatabaseConfigurationError, DatabaseInitializationError
from blog_api.main import app
from blog_api.middleware import lifespan

SETTINGS_PATH = "blog_api.middleware.middleware.settings"


async def test_missing_database_url_aborts_startup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(SETTINGS_PATH, Settings(_env_file=None, DATABASE_URL=None))
    test_app = FastAPI()

    with pytest.raises(DatabaseConfigurationError):
        async with lifespan(test_app):
            pass

    assert not hasattr(test_app.state, "database")


async def test_unreachable_store_aborts_startup(monkeypatch: pytest.MonkeyPatch) -> None:
    async def refuse(self: Database) -> None:
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(SETTINGS_PATH, Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite://"))
    monkeypatch.setattr(Database, "create_all", refuse)

    with pytest.raises(DatabaseInitializationError):
        async with lifespan(FastAPI()):
            pass


async def test_startup_attaches_database(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(SETTINGS_PATH, Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite://"))
    test_app = FastAPI()

    async with lifespan(test_app):
        assert isinstance(test_app.state.database, Database)


async def test_serves_requests_after_startup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(SETTINGS_PATH, Settings(_env_file=None, DATABASE_URL="sqlite+aiosqlite://"))

    async with (
        lifespan(app),
        AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as client,
    ):
        response = await client.get("/api/blogs/count")

    assert response.status_code == 200
    assert response.json() == {"count": 0}


async def test_unknown_route_is_404(client: AsyncClient) -> None:
    response = await client.get("/api/nope")
    assert response.status_code == 404


def test_app_module_has_no_server_runner() -> None:
    # The root main.py is the only entry point that starts uvicorn
    source = inspect.getsource(app_module)
    assert "uvicorn" not in source
    assert '__name__ == "__main__"' not in source
