"""Post schemas."""

from typing import Any, Optional
from pydantic import BaseModel


class PostCreate(BaseModel):
    """Schema for creating a post."""
    title: str
    content: str
    author: str
    publishdate: Optional[Any] = None


class PostUpdate(PostCreate):
    """Schema for replacing a post; every field is overwritten."""
    id: Optional[int] = None
