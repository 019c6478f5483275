"""Custom validation error handling for FastAPI."""

from dataclasses import asdict, dataclass
from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from blog_api.configs import file_logger
from blog_api.errors.base import BaseAppError
from blog_api.utils.helpers import host

logger = file_logger(getLogger(__name__))


@dataclass(frozen=True)
class FieldError:
    """A single failed field check."""

    field: str
    message: str


def join_messages(errors: list[FieldError]) -> str:
    """Collapse field errors into one human readable sentence."""
    return "; ".join(error.message for error in errors) or "Validation failed"


class ValidationFailedError(BaseAppError):
    """Raised when one or more blog fields fail validation."""

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__(detail=join_messages(errors), status_code=HTTP_400_BAD_REQUEST)
        self.errors = [asdict(error) for error in errors]


async def validation_failed_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Render a `ValidationFailedError` as a 400 with itemized field errors."""
    error = cast(ValidationFailedError, exc)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {error.errors}",
    )

    return ORJSONResponse(
        status_code=error.status_code,
        content={"detail": error.detail, "errors": error.errors},
    )


def _field_name(loc: tuple | list) -> str:
    # Skip the 'body' / 'query' / 'path' prefix
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request parsing errors with the same shape as field validation errors.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with status 400 and formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    field_errors = []
    for error in exec_error.errors():
        field = _field_name(error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        field_errors.append(FieldError(field=field, message=f"{field}: {message}"))

    return await validation_failed_handler(request, ValidationFailedError(field_errors))
