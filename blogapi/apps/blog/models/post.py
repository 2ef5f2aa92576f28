"""Post model."""

from typing import Any, Optional

from sqlmodel import Field, SQLModel


class Post(SQLModel):
    """Post model class."""

    id: int = Field(description="Assigned by the store, never reused")
    title: str = Field()
    content: str = Field()
    author: str = Field()
    # Opaque to the store: epoch millis, free text, whatever the client sends
    publishdate: Optional[Any] = Field(default=None)
