"""Package initializer."""

from .author import Author
from .post import Post

__all__ = ["Author", "Post"]
