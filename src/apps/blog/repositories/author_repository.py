"""Author repository."""

from typing import Any, Optional

from sqlmodel import select
from sqlalchemy.exc import SQLAlchemyError

from src.core.bases.base_repository import BaseRepository
from src.apps.blog.models.author import Author
from src.apps.blog.models.post import Post


class AuthorRepository(BaseRepository[Author]):
    """Author repository class."""

    model = Author

    async def delete_with_posts(self, author_id: Any) -> Optional[int]:  # type:ignore
        """Delete the author and every post referencing it in one transaction.

        Returns the number of posts removed, or None when the author does not
        exist (nothing is written in that case).
        """
        async with self.get_session() as db:
            try:
                author = await db.get(Author, author_id)
                if not author:
                    return None

                result = await db.exec(select(Post).where(Post.author_id == author_id))
                posts = result.all()
                for post in posts:
                    await db.delete(post)
                # Posts must be gone before the author row under FK enforcement.
                await db.flush()

                await db.delete(author)
                await db.commit()
                return len(posts)
            except SQLAlchemyError as e:
                await db.rollback()
                self._handle_db_error(e, "delete_with_posts")
