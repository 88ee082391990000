"""Package initializer."""

from .author import AuthorCreate, AuthorRead, AuthorUpdate
from .post import PostCreate, PostRead, PostUpdate, PostWithAuthor

__all__ = [
    "AuthorCreate",
    "AuthorRead",
    "AuthorUpdate",
    "PostCreate",
    "PostRead",
    "PostUpdate",
    "PostWithAuthor",
]
