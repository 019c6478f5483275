"""
Slug generation.

`slugify` is a pure title transform. `generate_unique_slug` adds the
collision suffix by probing the store through an injected predicate, so it
can be exercised with a plain in-memory set in tests.
"""

from collections.abc import Awaitable, Callable
from logging import getLogger
from re import compile as re_compile
from uuid import UUID

from blog_api.configs import file_logger

logger = file_logger(getLogger(__name__))

NON_ALNUM_RUN = re_compile(r"[^a-z0-9]+")
SLUG_PATTERN = re_compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

type SlugProbe = Callable[[str, UUID | None], Awaitable[bool]]


def slugify(title: str) -> str:
    """
    Derive the base slug for a title.

    Lower-cases the text, collapses every run of characters outside
    ``[a-z0-9]`` into one hyphen and trims hyphens from both ends.

    Examples:
    --------
    >>> slugify("Hello, World!")
    'hello-world'
    >>> slugify("???")
    ''
    """
    return NON_ALNUM_RUN.sub("-", title.lower()).strip("-")


def is_valid_slug(slug: str) -> bool:
    """Return True if ``slug`` is non-empty lowercase alphanumerics joined by single hyphens."""
    return bool(SLUG_PATTERN.match(slug))


async def generate_unique_slug(
    title: str,
    slug_exists: SlugProbe,
    exclude_id: UUID | None = None,
) -> str:
    """
    Return the first free slug for ``title``.

    Tries the base slug, then ``base-1``, ``base-2``, ... until ``slug_exists``
    reports the candidate as free. ``exclude_id`` is forwarded to the probe so
    a post being updated does not collide with itself.

    The result is only free at the moment of the check; the store's unique
    index still decides when two writers race for the same slug.

    Args:
        title: Post title.
        slug_exists: Async predicate ``(slug, exclude_id) -> bool``.
        exclude_id: ID of the post being updated, if any.

    Returns:
        str: Free slug, or ``""`` when the title has no alphanumerics.
    """
    base = slugify(title)
    if not base:
        return base

    candidate = base
    counter = 1
    while await slug_exists(candidate, exclude_id):
        candidate = f"{base}-{counter}"
        counter += 1

    if candidate != base:
        logger.info(f"Slug '{base}' taken, using '{candidate}'")
    return candidate
