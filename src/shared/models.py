"""Import every table model so SQLModel.metadata knows about it."""

from src.apps.blog.models.author import Author  # noqa: F401
from src.apps.blog.models.post import Post  # noqa: F401
