"""Post service."""

from typing import Any, Dict
from blogapi.core.bases.base_service import BaseService
from blogapi.core.exceptions import ValidationException
from blogapi.core.response.schemas import ErrorDetail
from blogapi.apps.blog.repositories.post_repository import PostStore
from blogapi.apps.blog.models.post import Post


class PostService(BaseService[Post]):
    """Post service class."""

    def __init__(self, repository: PostStore):
        super().__init__(repository)

    async def _validate_update(
        self,
        item_id: Any,
        update_data: Dict[str, Any],
        existing_item: Post
    ) -> None:
        """The body may repeat the id, but it must match the path."""
        body_id = update_data.get("id")
        if body_id is not None and body_id != item_id:
            raise ValidationException(
                f"Request path id ({item_id}) and request body id ({body_id}) must match",
                error_details=[
                    ErrorDetail(
                        field="id",
                        code="ID_MISMATCH",
                        message="Body id differs from path id",
                        target="body",
                    )
                ],
            )
