"""Author schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class AuthorCreate(BaseModel):
    """Schema for creating an author."""
    name: str


class AuthorUpdate(BaseModel):
    """Schema for updating an author."""
    name: Optional[str] = None


class AuthorRead(BaseModel):
    """Author as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
