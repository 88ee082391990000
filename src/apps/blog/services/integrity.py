"""Referential integrity between posts and authors.

A post may only reference an author that exists, and deleting an author
takes its posts with it inside the same transaction so that no reader
ever observes a post pointing at a missing author.
"""

import logging
from typing import Any

from src.core import exceptions
from src.core.bases.base_service import storage_errors
from src.apps.blog.repositories.author_repository import AuthorRepository

logger = logging.getLogger(__name__)


class ReferentialIntegrity:
    """Author/post integrity rules shared by both services."""

    def __init__(self, author_repository: AuthorRepository):
        self.author_repository = author_repository

    async def ensure_author_exists(self, author_id: Any) -> None:
        with storage_errors("check author"):
            found = await self.author_repository.exists(author_id)
        if not found:
            logger.warning("Rejected write referencing missing author %s", author_id)
            raise exceptions.NotFoundException("Author", author_id, field="author_id")

    async def delete_author_cascade(self, author_id: Any) -> bool:
        with storage_errors("delete author"):
            removed_posts = await self.author_repository.delete_with_posts(author_id)
        if removed_posts is None:
            return False
        logger.info("Author %s removed with %d post(s)", author_id, removed_posts)
        return True
