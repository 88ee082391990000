"""Post model."""

from datetime import datetime

from sqlmodel import Field
from src.core.config import settings
from src.core.database import BaseModel, UTCDateTime


class Post(BaseModel, table=True):
    """Post model class."""

    __tablename__ = "blog_posts"  # type: ignore
    title: str = Field()
    content: str = Field()
    author_id: int = Field(foreign_key="blog_authors.id", index=True)
    updated_at: datetime = Field(
        default_factory=settings.get_now,
        sa_type=UTCDateTime,  # type: ignore
        nullable=False,
    )
