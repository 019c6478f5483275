"""Blog post database model using SQLModel."""

from datetime import datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import DateTime, Index, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blog_api.configs.settings import MAX_SLUG_LENGTH, MAX_TITLE_LENGTH
from blog_api.utils.helpers import utc_now


class BlogPostDB(SQLModel, table=True):
    """
    Blog post database model.

    The unique index on ``slug`` is what finally guarantees slug uniqueness;
    the probe in the slug generator only avoids most collisions up front.
    """

    __tablename__ = cast("declared_attr[str]", "blog_posts")

    __table_args__ = (Index("ix_blog_posts_created_at", "created_at"),)

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog post ID",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), nullable=False),
        description="Blog title",
    )
    slug: str = Field(
        sa_column=Column(String(MAX_SLUG_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )
    author: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Author display name",
    )
    image: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Cover image URL or path",
    )
    summary: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog summary/excerpt",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog content",
    )

    # Timestamps (timezone-aware)
    date: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Publication date",
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Hello World",
                "slug": "hello-world",
                "author": "Jane Doe",
                "image": "/images/hello.jpg",
                "summary": "A first post",
                "content": "Welcome to the blog.",
            },
        },
    )
