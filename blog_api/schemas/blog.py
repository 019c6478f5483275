"""
Blog post request and response models.

Request models are deliberately lenient: every field is optional at the
parsing layer so that missing or empty values are reported by
`blog_api.services.validation` as itemized field errors instead of a generic
parsing failure. Only type mismatches and unparseable dates are rejected here.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog_api.utils.helpers import parse_datetime


class BlogPostInput(BaseModel):
    """Fields a client may send when writing a blog post."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: str | None = Field(default=None, examples=["Hello World"])
    slug: str | None = Field(
        default=None,
        description="URL slug (generated from title when omitted)",
        examples=["hello-world"],
    )
    author: str | None = Field(default=None, examples=["Jane Doe"])
    date: datetime | None = Field(
        default=None,
        description="Publication date (ISO 8601); defaults to creation time",
        examples=["2025-01-01T09:00:00Z"],
    )
    image: str | None = Field(default=None, examples=["/images/hello.jpg"])
    summary: str | None = Field(default=None, examples=["A first post"])
    content: str | None = Field(default=None, examples=["Welcome to the blog."])

    @field_validator("date", mode="before")
    @classmethod
    def parse_date_text(cls, v: Any) -> Any:
        """Parse textual dates; other values go through normal validation."""
        if isinstance(v, str):
            try:
                return parse_datetime(v)
            except ValueError as e:
                mssg = f"Invalid date '{v}'"
                raise ValueError(mssg) from e
        return v

    def supplied(self) -> dict[str, Any]:
        """Return only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class BlogCreate(BlogPostInput):
    """Blog creation payload."""


class BlogUpdate(BlogPostInput):
    """Blog update payload (partial: absent fields keep their stored values)."""


class BlogResponse(BaseModel):
    """Blog post as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    slug: str
    author: str
    date: datetime
    image: str
    summary: str
    content: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class BlogMutationResponse(BaseModel):
    """Confirmation message plus the stored post."""

    message: str
    post: BlogResponse


class BlogCountResponse(BaseModel):
    """Number of posts matching a search."""

    count: int


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
