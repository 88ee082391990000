"""Post schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from src.apps.blog.schemas.author import AuthorRead


class PostCreate(BaseModel):
    """Schema for creating a post."""
    title: str
    content: str
    author_id: int


class PostUpdate(BaseModel):
    """Schema for updating a post."""
    title: Optional[str] = None
    content: Optional[str] = None
    author_id: Optional[int] = None


class PostRead(BaseModel):
    """Post as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    author_id: int
    created_at: datetime
    updated_at: datetime


class PostWithAuthor(PostRead):
    """Post joined with the author it references."""
    author: AuthorRead
