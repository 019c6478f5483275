from blog_api.services.slug import generate_unique_slug, is_valid_slug, slugify
from blog_api.services.validation import (
    REQUIRED_FIELDS,
    untitled_slug_error,
    validate_blog_fields,
)

__all__ = [
    "REQUIRED_FIELDS",
    "generate_unique_slug",
    "is_valid_slug",
    "slugify",
    "untitled_slug_error",
    "validate_blog_fields",
]
