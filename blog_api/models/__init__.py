"""Database models for the application."""

from blog_api.models.blog import BlogPostDB

__all__ = ["BlogPostDB"]
