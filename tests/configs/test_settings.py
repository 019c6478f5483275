# tests/configs/test_settings.py
"""Tests for blog_api/configs/settings.py module."""

import pytest

from blog_api.configs import Settings


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgres://u:p@db:5432/blog", "postgresql+asyncpg://u:p@db:5432/blog"),
        ("postgresql://u:p@db/blog", "postgresql+asyncpg://u:p@db/blog"),
        ("postgresql+asyncpg://u:p@db/blog", "postgresql+asyncpg://u:p@db/blog"),
        ("sqlite+aiosqlite:///./blog.db", "sqlite+aiosqlite:///./blog.db"),
        ("", None),
    ],
)
def test_database_url_normalization(url: str, expected: str | None) -> None:
    assert Settings(_env_file=None, DATABASE_URL=url).DATABASE_URL == expected


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "CORS_ORIGINS", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 5000
    assert settings.CORS_ORIGINS == ["*"]
    assert settings.DATABASE_URL is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", '["https://blog.example.com"]')

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.CORS_ORIGINS == ["https://blog.example.com"]
