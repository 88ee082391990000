"""Author model."""

from sqlmodel import Field
from src.core.database import BaseModel


class Author(BaseModel, table=True):
    """Author model class."""

    __tablename__ = "blog_authors"  # type: ignore
    name: str = Field()
