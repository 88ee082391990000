"""Service wiring for the blog app."""

from src.core.database import Database
from src.apps.blog.repositories.author_repository import AuthorRepository
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.services.author_service import AuthorService
from src.apps.blog.services.integrity import ReferentialIntegrity
from src.apps.blog.services.post_service import PostService


def get_author_repository(database: Database) -> AuthorRepository:
    """Get author repository instance."""
    return AuthorRepository(database.get_session)  # type:ignore


def get_post_repository(database: Database) -> PostRepository:
    """Get post repository instance."""
    return PostRepository(database.get_session)  # type:ignore


def get_integrity(database: Database) -> ReferentialIntegrity:
    return ReferentialIntegrity(get_author_repository(database))


def get_author_service(database: Database) -> AuthorService:
    """Get author service instance."""
    return AuthorService(get_author_repository(database), get_integrity(database))


def get_post_service(database: Database) -> PostService:
    """Get post service instance."""
    return PostService(get_post_repository(database), get_integrity(database))
