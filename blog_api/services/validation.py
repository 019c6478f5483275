"""Explicit field validation for blog post writes."""

from typing import Any

from blog_api.configs.settings import MAX_SLUG_LENGTH, MAX_TITLE_LENGTH
from blog_api.errors.validation import FieldError
from blog_api.services.slug import is_valid_slug

REQUIRED_FIELDS: tuple[str, ...] = ("title", "author", "image", "summary", "content")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_blog_fields(data: dict[str, Any], *, partial: bool = False) -> list[FieldError]:
    """
    Check required and formatted fields of a blog payload.

    With ``partial=False`` (create) every required field must be present and
    non-empty. With ``partial=True`` (update) only the fields present in
    ``data`` are checked, but those must still be non-empty.

    Args:
        data: Field values as sent by the client.
        partial: Whether absent fields are allowed.

    Returns:
        list[FieldError]: Failures in field order; empty when the payload is valid.
    """
    errors: list[FieldError] = []

    for field in REQUIRED_FIELDS:
        if partial and field not in data:
            continue
        if _is_blank(data.get(field)):
            errors.append(FieldError(field=field, message=f"{field.capitalize()} is required"))

    title = data.get("title")
    if isinstance(title, str) and len(title) > MAX_TITLE_LENGTH:
        errors.append(
            FieldError(
                field="title",
                message=f"Title must be at most {MAX_TITLE_LENGTH} characters",
            ),
        )

    if "slug" in data and data["slug"] is not None:
        slug = data["slug"]
        if not is_valid_slug(slug):
            errors.append(
                FieldError(
                    field="slug",
                    message="Slug must be lowercase alphanumeric with hyphens only",
                ),
            )
        elif len(slug) > MAX_SLUG_LENGTH:
            errors.append(
                FieldError(
                    field="slug",
                    message=f"Slug must be at most {MAX_SLUG_LENGTH} characters",
                ),
            )

    return errors


def untitled_slug_error() -> FieldError:
    """Error for titles that yield no slug characters."""
    return FieldError(field="title", message="Title must contain at least one letter or digit")
