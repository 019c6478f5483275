from blog_api.routes.blog import get_blog_repository
from blog_api.routes.blog import router as blog_router

__all__ = ["blog_router", "get_blog_repository"]
