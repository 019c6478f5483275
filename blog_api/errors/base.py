from collections.abc import Awaitable, Callable
from logging import Logger
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blog_api.configs import DEFAULT_ERROR_MESSAGE
from blog_api.utils.helpers import host

# Low-level failures that mean the store (or the host) is unavailable
BASE_EXCEPTION = (
    OSError,
    ConnectionError,
    TimeoutError,
)


class BaseAppError(Exception):
    """
    Base exception class for application errors.

    Carries the HTTP status to answer with. Extra public attributes set by
    subclasses are included in the JSON error body.
    """

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


def error_body(exc: Exception, detail: str) -> dict[str, Any]:
    """Build ``{"detail": ...}`` plus the exception's public extra attributes."""
    extras = {
        key: value
        for key, value in vars(exc).items()
        if not key.startswith("_") and key not in ("status_code", "detail")
    }
    return {"detail": detail, **extras}


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create an exception handler that renders `BaseAppError`-like exceptions.

    Client errors (4xx) are answered with their own detail. Server errors
    (5xx) are logged with their traceback and answered with the generic
    ``"Server error"`` message so store internals never reach the client.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code: int = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail: str = getattr(exc, "detail", "Internal Server Error")
        origin = f"for ip: {host(request)} for endpoint {request.url.path}"

        if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(f"{detail} {origin}", exc_info=exc)
            return ORJSONResponse(
                content={"detail": DEFAULT_ERROR_MESSAGE},
                status_code=status_code,
            )

        logger.warning(f"{detail} {origin}")
        return ORJSONResponse(content=error_body(exc, detail), status_code=status_code)

    return handler
