"""Repository layer for database operations."""

from blog_api.repositories.base import BaseRepository
from blog_api.repositories.blog import BlogRepository, search_filter

__all__ = ["BaseRepository", "BlogRepository", "search_filter"]
