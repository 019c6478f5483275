"""Store handle and session management."""

from blog_api.db.database import Database, engine_options, get_session

__all__ = ["Database", "engine_options", "get_session"]
