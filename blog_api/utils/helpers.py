from collections.abc import MutableMapping
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def parse_datetime(value: str) -> datetime:
    """
    Parse an ISO 8601 date or datetime string.

    Date-only values (``2024-05-01``) resolve to midnight; a trailing ``Z`` is
    accepted. Naive values are assumed to be UTC.

    Args:
        value: Text to parse.

    Returns:
        datetime: Timezone-aware datetime.

    Raises:
        ValueError: If the text is not a recognizable date.
    """
    text = value.strip()
    if not text:
        mssg = "Date must not be empty"
        raise ValueError(mssg)

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
