"""Post service."""

from typing import Any, Dict, List, Optional

from src.core import exceptions
from src.core.config import settings
from src.core.bases.base_service import BaseService, require_text, storage_errors
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.models.post import Post
from src.apps.blog.schemas.author import AuthorRead
from src.apps.blog.schemas.post import PostWithAuthor
from src.apps.blog.services.integrity import ReferentialIntegrity


def _join(row) -> PostWithAuthor:
    post, author = row
    return PostWithAuthor(
        **post.model_dump(), author=AuthorRead.model_validate(author)
    )


class PostService(BaseService[Post]):
    """Post service class."""

    entity_name = "Post"

    def __init__(self, repository: PostRepository, integrity: ReferentialIntegrity):
        super().__init__(repository)
        self.repository: PostRepository = repository
        self.integrity = integrity

    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        require_text(create_data, "title", "Post title")
        require_text(create_data, "content", "Post content")
        if create_data.get("author_id") is None:
            raise exceptions.ValidationException.for_field("author_id", "Author is required")
        await self.integrity.ensure_author_exists(create_data["author_id"])

    def _prepare_create(self, create_data: Dict[str, Any]) -> None:
        now = settings.get_now()
        create_data["created_at"] = now
        create_data["updated_at"] = now

    async def _validate_update(
        self,
        item_id: Any,
        update_data: Dict[str, Any],
        existing_item: Post
    ) -> None:
        for field, label in (("title", "Post title"), ("content", "Post content")):
            if field in update_data:
                require_text(update_data, field, label)
        if "author_id" in update_data:
            if update_data["author_id"] is None:
                raise exceptions.ValidationException.for_field("author_id", "Author is required")
            await self.integrity.ensure_author_exists(update_data["author_id"])

    def _prepare_update(self, update_data: Dict[str, Any]) -> None:
        # Every update call refreshes the modification time, even with no fields.
        update_data["updated_at"] = settings.get_now()

    def _integrity_failure(self, data: Dict[str, Any]) -> Optional[exceptions.ServiceException]:
        # The author can vanish between the existence check and the write.
        if data.get("author_id") is None:
            return None
        return exceptions.NotFoundException("Author", data["author_id"], field="author_id")

    async def get(self, item_id: Any) -> Optional[PostWithAuthor]:  # type: ignore[override]
        """Return the post joined with its author, or None."""
        with storage_errors("get Post"):
            row = await self.repository.get_with_author(item_id)
        return _join(row) if row else None

    async def list(self) -> List[PostWithAuthor]:  # type: ignore[override]
        with storage_errors("list Post"):
            rows = await self.repository.get_many_with_author()
        return [_join(row) for row in rows]
