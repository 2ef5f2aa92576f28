"""Post router."""

from blogapi.core.bases.base_router import BaseRouter
from blogapi.apps.blog.services.post_service import PostService
from blogapi.apps.blog.repositories.post_repository import PostStore
from blogapi.apps.blog.schemas.post import PostCreate, PostUpdate


class PostRouter(BaseRouter):
    """Post router class."""

    def __init__(self, store: PostStore, prefix: str = "/blog-posts"):
        super().__init__(
            service=PostService(store),
            create_schema=PostCreate,
            update_schema=PostUpdate,
            prefix=prefix,
            tags=["Blog Posts"]
        )
