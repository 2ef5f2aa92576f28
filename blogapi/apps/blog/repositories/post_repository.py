"""Post store."""

from blogapi.core.bases.base_repository import BaseRepository
from blogapi.apps.blog.models.post import Post

SAMPLE_POSTS = [
    {
        "title": "Ten things I learned building an API",
        "content": "Start with the tests, keep the handlers thin.",
        "author": "Jane Doe",
        "publishdate": "march 30, 2018",
    },
    {
        "title": "Why in-memory stores are underrated",
        "content": "Not everything needs a database on day one.",
        "author": "John Smith",
    },
]


class PostStore(BaseRepository[Post]):
    """Post store class."""

    model = Post
    required_fields = ("title", "content", "author")

    def seed(self) -> None:
        """Load the sample posts the server starts with."""
        self.create_many(SAMPLE_POSTS)  # type: ignore
