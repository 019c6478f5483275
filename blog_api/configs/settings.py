"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the blog posts backend.
"""

from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 6
MAX_SLUG_LENGTH = 255
MAX_TITLE_LENGTH = 200

# Response constants
DEFAULT_ERROR_MESSAGE = "Server error"
NOT_FOUND_MESSAGE = "Blog not found"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog Posts API"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"  # noqa: S104
    PORT: int = 5000

    # Logging
    LOG_TO_FILE: bool = False
    LOG_LEVEL: str = "INFO"

    # Database Configuration
    DATABASE_URL: str | None = None
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str | None) -> str | None:
        """Point bare PostgreSQL URLs at the asyncpg driver."""
        if not v:
            return None
        # Hosting providers hand out 'postgres://' which SQLAlchemy rejects
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+asyncpg://" + v.removeprefix(prefix)
        return v


settings = Settings()

LOG_DIR = Path("logs")
LOG_FILE = LOG_DIR / "app.log"


def file_logger(logger: Logger) -> Logger:
    """
    Attach a rotating JSON file handler to ``logger`` when file logging is enabled.

    Safe to call repeatedly; the handler is added at most once per logger.

    Args:
        logger: Logger to configure.

    Returns:
        Logger: The same logger, for ``logger = file_logger(getLogger(__name__))``.
    """
    if not settings.LOG_TO_FILE:
        return logger

    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger
