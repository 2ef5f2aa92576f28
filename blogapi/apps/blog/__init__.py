"""Blog app."""

from blogapi.apps.blog.repositories.post_repository import PostStore
from blogapi.apps.blog.routers.post_router import PostRouter

__all__ = ["PostRouter", "PostStore"]
