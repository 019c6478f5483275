# tests/utils/test_helpers.py
"""Tests for blog_api/utils/helpers.py module."""

from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from blog_api.utils.helpers import get_summary, host, parse_datetime, utc_now


class TestParseDatetime:
    """Tests for parse_datetime function."""

    def test_date_only_is_utc_midnight(self) -> None:
        assert parse_datetime("2024-05-01") == datetime(2024, 5, 1, tzinfo=UTC)

    def test_trailing_z(self) -> None:
        assert parse_datetime("2024-05-01T10:30:00Z") == datetime(2024, 5, 1, 10, 30, tzinfo=UTC)

    def test_offset_is_kept(self) -> None:
        parsed = parse_datetime("2024-05-01T10:30:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed == datetime(2024, 5, 1, 8, 30, tzinfo=UTC)

    def test_surrounding_whitespace(self) -> None:
        assert parse_datetime("  2024-05-01  ").tzinfo is UTC

    @pytest.mark.parametrize("value", ["", "   ", "yesterday", "2024-13-01"])
    def test_rejects(self, value: str) -> None:
        with pytest.raises(ValueError):
            parse_datetime(value)


def test_utc_now_is_aware() -> None:
    assert utc_now().tzinfo is UTC


class TestHost:
    def test_client_ip(self) -> None:
        request = MagicMock()
        request.client.host = "10.0.0.1"
        assert host(request) == "10.0.0.1"

    def test_missing_client(self) -> None:
        request = MagicMock()
        request.client = None
        assert host(request) == "unknown"


def test_get_summary_returns_route_summary() -> None:
    app = FastAPI()
    captured: dict[str, str | None] = {}

    @app.get("/posts", summary="List posts")
    async def posts() -> dict[str, str]:
        return {}

    @app.middleware("http")
    async def capture(request, call_next):  # noqa: ANN001, ANN202
        captured["summary"] = get_summary(request)
        return await call_next(request)

    with TestClient(app) as client:
        client.get("/posts")

    assert captured["summary"] == "List posts"
