"""Author service."""

from typing import Any, Dict
from src.core.bases.base_service import BaseService, require_text
from src.apps.blog.repositories.author_repository import AuthorRepository
from src.apps.blog.models.author import Author
from src.apps.blog.services.integrity import ReferentialIntegrity


class AuthorService(BaseService[Author]):
    """Author service class."""

    entity_name = "Author"

    def __init__(self, repository: AuthorRepository, integrity: ReferentialIntegrity):
        super().__init__(repository)
        self.integrity = integrity

    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        require_text(create_data, "name", "Author name")

    async def _validate_update(
        self,
        item_id: Any,
        update_data: Dict[str, Any],
        existing_item: Author
    ) -> None:
        if "name" in update_data:
            require_text(update_data, "name", "Author name")

    async def _perform_delete(self, item_id: Any) -> bool:
        return await self.integrity.delete_author_cascade(item_id)
