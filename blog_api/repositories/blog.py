"""Blog post repository for database operations."""

from logging import getLogger
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, desc, func, or_, select

from blog_api.configs import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, file_logger
from blog_api.errors.validation import FieldError, ValidationFailedError
from blog_api.models.blog import BlogPostDB
from blog_api.repositories.base import BaseRepository
from blog_api.schemas.blog import BlogCreate, BlogUpdate
from blog_api.services.slug import generate_unique_slug
from blog_api.services.validation import untitled_slug_error, validate_blog_fields
from blog_api.utils.helpers import utc_now

logger = file_logger(getLogger(__name__))


def search_filter(search: str | None) -> ColumnElement[bool] | None:
    """
    Build the match predicate shared by listing and counting.

    Matches posts whose title or author contains ``search``,
    case-insensitively, as a literal substring.

    Args:
        search: Free text; blank means no filtering.

    Returns:
        ColumnElement[bool] | None: WHERE clause, or None for "match all".
    """
    if not search or not search.strip():
        return None

    return or_(
        # pyrefly: ignore [missing-attribute]
        BlogPostDB.title.icontains(search, autoescape=True),
        # pyrefly: ignore [missing-attribute]
        BlogPostDB.author.icontains(search, autoescape=True),
    )


def duplicate_slug_detail(slug: str | None) -> str:
    return f"Blog with slug '{slug}' already exists"


class BlogRepository(BaseRepository[BlogPostDB]):
    """
    Repository for blog post database operations.

    Besides plain CRUD this owns the write-time rules: field validation,
    date defaulting and slug assignment happen here before anything is sent
    to the store.
    """

    model = BlogPostDB

    async def slug_exists(self, slug: str, exclude_id: UUID | None = None) -> bool:
        """
        Check whether another post already uses ``slug``.

        Args:
            slug: Candidate slug
            exclude_id: Post to ignore (the one being updated)

        Returns:
            bool: True if the slug is taken
        """
        return await self._check_exists_by_field("slug", slug, exclude_id)

    async def get_by_slug(self, slug: str) -> BlogPostDB | None:
        """
        Get blog post by slug.

        Args:
            slug: Blog slug

        Returns:
            BlogPostDB | None: Post if found, None otherwise
        """
        return await self.get_by_field("slug", slug)

    async def list_posts(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        search: str | None = None,
    ) -> list[BlogPostDB]:
        """
        Get one page of posts, newest first, optionally filtered by search text.

        Args:
            page: 1-based page number
            limit: Page size
            search: Optional title/author substring

        Returns:
            list[BlogPostDB]: Posts on the requested page
        """
        query = select(BlogPostDB)

        if (condition := search_filter(search)) is not None:
            query = query.where(condition)

        # Apply pagination and ordering
        # pyrefly: ignore [bad-argument-type]
        query = query.order_by(desc(BlogPostDB.created_at))
        query = query.offset((page - 1) * limit).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_posts(self, search: str | None = None) -> int:
        """
        Count posts matching the same predicate as `list_posts`.

        Args:
            search: Optional title/author substring

        Returns:
            int: Number of matching posts
        """
        statement = select(func.count()).select_from(BlogPostDB)

        if (condition := search_filter(search)) is not None:
            statement = statement.where(condition)

        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def create(self, blog: BlogCreate) -> BlogPostDB:
        """
        Validate and insert a new blog post.

        Args:
            blog: Creation payload

        Returns:
            BlogPostDB: Stored post with generated id, slug and timestamps

        Raises:
            ValidationFailedError: If required fields are missing or invalid
            DuplicateEntryError: If the slug is taken (explicit slug or lost race)
        """
        data = blog.supplied()
        if not data.get("slug"):
            data.pop("slug", None)

        errors = validate_blog_fields(data)

        if "slug" not in data:
            data["slug"] = await self._slug_for_title(data.get("title"), None, errors)

        if errors:
            raise ValidationFailedError(errors)

        if data.get("date") is None:
            data.pop("date", None)

        now = utc_now()
        db_post = BlogPostDB(**data, created_at=now, updated_at=now)

        db_post = await self._add_and_refresh(
            db_post,
            duplicate_detail=duplicate_slug_detail(data["slug"]),
        )
        logger.info(f"Created blog post {db_post.id} with slug '{db_post.slug}'")
        return db_post

    async def update(self, post_id: UUID, blog_update: BlogUpdate) -> BlogPostDB | None:
        """
        Apply a partial update to a blog post.

        Only supplied fields change. A supplied title regenerates the slug,
        ignoring the post's own current slug when probing for collisions.

        Args:
            post_id: Post UUID
            blog_update: Fields to change

        Returns:
            BlogPostDB | None: Updated post if found, None otherwise

        Raises:
            ValidationFailedError: If a supplied field is empty or invalid
            DuplicateEntryError: If an explicit slug is already taken
        """
        db_post = await self.get_by_id(post_id)
        if not db_post:
            return None

        data = blog_update.supplied()
        if data.get("date") is None:
            data.pop("date", None)
        if not data.get("slug"):
            data.pop("slug", None)

        errors = validate_blog_fields(data, partial=True)

        title = data.get("title")
        if title is not None:
            data["slug"] = await self._slug_for_title(title, post_id, errors)

        if errors:
            raise ValidationFailedError(errors)

        for key, value in data.items():
            setattr(db_post, key, value)
        db_post.updated_at = utc_now()

        db_post = await self._add_and_refresh(
            db_post,
            duplicate_detail=duplicate_slug_detail(data.get("slug", db_post.slug)),
        )
        logger.info(f"Updated blog post {post_id}")
        return db_post

    async def _slug_for_title(
        self,
        title: Any,
        exclude_id: UUID | None,
        errors: list[FieldError],
    ) -> str:
        """Generate a unique slug, recording a title error when none can be derived."""
        if not isinstance(title, str) or not title.strip():
            # Missing title is already reported by field validation
            return ""

        slug = await generate_unique_slug(title, self.slug_exists, exclude_id)
        if not slug:
            errors.append(untitled_slug_error())
        return slug
