# blog_api/routes/blog.py

"""
Blog Routes.

Provides CRUD endpoints, listing with search and pagination, counting and
slug lookup for blog posts.

Summary
-------
Endpoints include:
  - List blogs (paginated, optional title/author search)
  - Count blogs (same search predicate as the listing)
  - Get blog by id
  - Get blog by slug
  - Create blog
  - Update blog
  - Delete blog

Errors
------
Handlers raise application errors (`RecordNotFoundError`,
`ValidationFailedError`, `DuplicateEntryError`); the exception handlers
registered in `blog_api.main` turn them into JSON responses.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import ORJSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.configs import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, NOT_FOUND_MESSAGE, file_logger
from blog_api.db import get_session
from blog_api.errors import RecordNotFoundError
from blog_api.models import BlogPostDB
from blog_api.repositories import BlogRepository
from blog_api.schemas import (
    BlogCountResponse,
    BlogCreate,
    BlogMutationResponse,
    BlogResponse,
    BlogUpdate,
    MessageResponse,
)

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

NOT_FOUND_RESPONSE = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": NOT_FOUND_MESSAGE}}},
}
BAD_REQUEST_RESPONSE = {
    "description": "Validation failed or duplicate slug",
    "content": {
        "application/json": {
            "example": {
                "detail": "Title is required; Author is required",
                "errors": [
                    {"field": "title", "message": "Title is required"},
                    {"field": "author", "message": "Author is required"},
                ],
            },
        },
    },
}


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


RepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


@dataclass(frozen=True)
class BlogListQuery:
    """
    Query container for blog listing.

    Parameters
    ----------
    page : int
        1-based page number.
    limit : int
        Page size.
    search : str
        Title/author substring; empty means no filter.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE
    search: str = ""


def get_blog_list_query(
    page: Annotated[int, Query(ge=1, description="Page number (1-based)")] = DEFAULT_PAGE,
    limit: Annotated[int, Query(ge=1, description="Posts per page")] = DEFAULT_PAGE_SIZE,
    search: Annotated[str, Query(description="Case-insensitive title/author filter")] = "",
) -> BlogListQuery:
    """
    Dependency to construct `BlogListQuery` from query parameters.

    Returns
    -------
    BlogListQuery
        Aggregated query parameters object.
    """
    return BlogListQuery(page=page, limit=limit, search=search)


def parse_post_id(blog_id: str) -> UUID:
    """
    Parse a path identifier, treating malformed ids as unknown posts.

    Raises
    ------
    RecordNotFoundError
        If ``blog_id`` is not a UUID.
    """
    try:
        return UUID(blog_id)
    except ValueError as e:
        raise RecordNotFoundError from e


async def get_existing_post(blog_id: str, repo: RepoDep) -> BlogPostDB:
    """
    Dependency resolving ``blog_id`` to a stored post.

    Raises
    ------
    RecordNotFoundError
        If the id is malformed or no post has it.
    """
    db_post = await repo.get_by_id(parse_post_id(blog_id))
    if not db_post:
        raise RecordNotFoundError
    return db_post


def db_post_to_response(db_post: BlogPostDB) -> BlogResponse:
    """Convert a `BlogPostDB` row into its response model."""
    return BlogResponse.model_validate(db_post, from_attributes=True)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Paginated list of blogs, newest first, optionally filtered by title/author.",
    operation_id="blogs_list",
)
async def list_blogs(
    repo: RepoDep,
    query: Annotated[BlogListQuery, Depends(get_blog_list_query)],
) -> list[BlogResponse]:
    """
    List blogs with pagination and search.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.
    query : BlogListQuery
        Page, page size and search text.

    Returns
    -------
    list[BlogResponse]
        Posts on the requested page.
    """
    db_posts = await repo.list_posts(page=query.page, limit=query.limit, search=query.search)
    return [db_post_to_response(post) for post in db_posts]


@router.get(
    "/count",
    response_class=ORJSONResponse,
    response_model=BlogCountResponse,
    summary="Count blogs",
    description="Number of blogs matching the same search used by the listing.",
    responses={200: {"content": {"application/json": {"example": {"count": 12}}}}},
    operation_id="blogs_count",
)
async def count_blogs(
    repo: RepoDep,
    search: Annotated[str, Query(description="Case-insensitive title/author filter")] = "",
) -> BlogCountResponse:
    """Count blogs matching ``search``."""
    return BlogCountResponse(count=await repo.count_posts(search))


@router.get(
    "/slug/{slug}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by slug",
    description="Retrieve a blog post by its slug.",
    responses={404: NOT_FOUND_RESPONSE},
    operation_id="blogs_get_by_slug",
)
async def get_blog_by_slug(slug: str, repo: RepoDep) -> BlogResponse:
    """
    Get blog by slug.

    Parameters
    ----------
    slug : str
        Blog slug.
    repo : BlogRepository
        Repository dependency.

    Raises
    ------
    RecordNotFoundError
        If no post has the slug.
    """
    db_post = await repo.get_by_slug(slug)
    if not db_post:
        raise RecordNotFoundError
    return db_post_to_response(db_post)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a blog post by its ID.",
    responses={404: NOT_FOUND_RESPONSE},
    operation_id="blogs_get_by_id",
)
async def get_blog(db_post: Annotated[BlogPostDB, Depends(get_existing_post)]) -> BlogResponse:
    """Get blog by ID."""
    return db_post_to_response(db_post)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogMutationResponse,
    summary="Create a new blog post",
    description="Create a blog post. The slug is generated from the title when omitted.",
    responses={400: BAD_REQUEST_RESPONSE},
    operation_id="blogs_create",
)
async def create_blog(blog: BlogCreate, repo: RepoDep) -> BlogMutationResponse:
    """
    Create a new blog post.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogMutationResponse
        Confirmation and the stored post.
    """
    db_post = await repo.create(blog)
    return BlogMutationResponse(
        message="Blog created successfully",
        post=db_post_to_response(db_post),
    )


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogMutationResponse,
    summary="Update blog",
    description="Partially update a blog post. Changing the title regenerates the slug.",
    responses={400: BAD_REQUEST_RESPONSE, 404: NOT_FOUND_RESPONSE},
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: str,
    blog_update: BlogUpdate,
    repo: RepoDep,
) -> BlogMutationResponse:
    """
    Update blog information.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    blog_update : BlogUpdate
        Fields to change.
    repo : BlogRepository
        Repository dependency.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    """
    db_post = await repo.update(parse_post_id(blog_id), blog_update)
    if not db_post:
        raise RecordNotFoundError
    return BlogMutationResponse(
        message="Blog updated successfully",
        post=db_post_to_response(db_post),
    )


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    summary="Delete blog",
    description="Delete a blog post by its ID.",
    responses={404: NOT_FOUND_RESPONSE},
    operation_id="blogs_delete",
)
async def delete_blog(blog_id: str, repo: RepoDep) -> MessageResponse:
    """Delete blog by ID."""
    deleted = await repo.delete(parse_post_id(blog_id))
    if not deleted:
        raise RecordNotFoundError
    logger.info(f"Deleted blog post {blog_id}")
    return MessageResponse(message="Blog deleted successfully")
