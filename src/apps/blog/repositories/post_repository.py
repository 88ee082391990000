"""Post repository."""

from typing import Any, List, Optional, Tuple

from sqlmodel import select
from sqlalchemy.exc import SQLAlchemyError

from src.core.bases.base_repository import BaseRepository
from src.apps.blog.models.author import Author
from src.apps.blog.models.post import Post


class PostRepository(BaseRepository[Post]):
    """Post repository class."""

    model = Post

    def _joined_stmt(self):
        return (
            select(Post, Author)
            .join(Author, Post.author_id == Author.id)  # type: ignore
            .order_by(Post.id)  # type: ignore
        )

    async def get_with_author(self, item_id: Any) -> Optional[Tuple[Post, Author]]:
        """Get a post together with its author row."""
        async with self.get_session() as db:
            try:
                result = await db.exec(self._joined_stmt().where(Post.id == item_id))
                row = result.first()
                return tuple(row) if row else None  # type: ignore
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_with_author")

    async def get_many_with_author(self) -> List[Tuple[Post, Author]]:  # type:ignore
        """Get every post together with its author row."""
        async with self.get_session() as db:
            try:
                result = await db.exec(self._joined_stmt())
                return [tuple(row) for row in result.all()]  # type: ignore
            except SQLAlchemyError as e:
                self._handle_db_error(e, "get_many_with_author")
