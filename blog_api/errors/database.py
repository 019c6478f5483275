from logging import getLogger

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from blog_api.configs import DEFAULT_ERROR_MESSAGE, NOT_FOUND_MESSAGE, file_logger
from blog_api.errors.base import BaseAppError, create_exception_handler
from blog_api.utils.helpers import host

logger = file_logger(getLogger(__name__))


class DatabaseError(BaseAppError):
    """Base exception for database errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when the database cannot be reached or a query fails."""

    def __init__(
        self,
        detail: str = DEFAULT_ERROR_MESSAGE,
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DatabaseConfigurationError(DatabaseError):
    """Exception raised when database configuration is missing or invalid."""

    def __init__(
        self,
        detail: str = "DATABASE_URL is not defined in environment variables",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DatabaseInitializationError(DatabaseError):
    """Exception raised when database initialization fails."""

    def __init__(
        self,
        detail: str = "Failed to initialize database",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DuplicateEntryError(DatabaseError):
    """Exception raised when a unique field value is already taken."""

    def __init__(
        self,
        detail: str = "A record with this value already exists",
    ) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class RecordNotFoundError(DatabaseError):
    """Exception raised when a record is not found."""

    def __init__(
        self,
        detail: str = NOT_FOUND_MESSAGE,
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


database_exception_handler = create_exception_handler(logger)


async def store_unavailable_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """
    Handle unexpected store failures (driver errors, lost connections).

    The full error is logged; the client only sees a generic message.
    """
    logger.error(
        f"Store failure for ip: {host(request)} at endpoint {request.url.path}",
        exc_info=exc,
    )
    return ORJSONResponse(
        content={"detail": DEFAULT_ERROR_MESSAGE},
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
    )
