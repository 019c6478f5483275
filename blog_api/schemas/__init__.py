from blog_api.schemas.blog import (
    BlogCountResponse,
    BlogCreate,
    BlogMutationResponse,
    BlogPostInput,
    BlogResponse,
    BlogUpdate,
    MessageResponse,
)

__all__ = [
    "BlogCountResponse",
    "BlogCreate",
    "BlogMutationResponse",
    "BlogPostInput",
    "BlogResponse",
    "BlogUpdate",
    "MessageResponse",
]
