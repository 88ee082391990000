import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar, Union

from pydantic import BaseModel
from sqlmodel import SQLModel

from src.core import exceptions
from src.core.bases.base_repository import (
    BaseRepository,
    RepositoryError,
    RepositoryIntegrityError,
)

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(
    operation: str,
    on_integrity: Optional[Callable[[], Optional[exceptions.ServiceException]]] = None,
) -> Iterator[None]:
    """Re-raise repository failures as StorageException.

    on_integrity may map a constraint violation to a more specific error.
    """
    try:
        yield
    except RepositoryIntegrityError as e:
        mapped = on_integrity() if on_integrity else None
        if mapped is None:
            logger.error("Storage failure during %s: %s", operation, e)
            raise exceptions.StorageException(detail=str(e)) from e
        raise mapped from e
    except RepositoryError as e:
        logger.error("Storage failure during %s: %s", operation, e)
        raise exceptions.StorageException(detail=str(e)) from e


def require_text(data: Dict[str, Any], field: str, label: str) -> None:
    """Fail when a text field is missing or blank after trimming."""
    value = data.get(field)
    if value is None or not str(value).strip():
        raise exceptions.ValidationException.for_field(field, f"{label} is required")


class BaseService(Generic[T]):
    """CRUD operations over a repository with validation hooks."""

    entity_name: str = "Item"

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    @staticmethod
    def _as_dict(data: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            return data.model_dump(exclude_unset=True)
        return dict(data)

    async def _get_or_404(self, item_id: Any) -> T:
        with storage_errors(f"get {self.entity_name}"):
            item = await self.repository.get(item_id)
        if item is None:
            raise exceptions.NotFoundException(self.entity_name, item_id)
        return item

    # ----------------- hooks ----------------- #
    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        """Validate data before creation."""
        pass

    async def _validate_update(
        self, item_id: Any, update_data: Dict[str, Any], existing_item: T
    ) -> None:
        """Validate data before update."""
        pass

    async def _validate_delete(self, item_id: Any, existing_item: T) -> None:
        """Validate before delete."""
        pass

    def _prepare_create(self, create_data: Dict[str, Any]) -> None:
        """Fill derived fields once validation has passed."""
        pass

    def _prepare_update(self, update_data: Dict[str, Any]) -> None:
        pass

    def _integrity_failure(self, data: Dict[str, Any]) -> Optional[exceptions.ServiceException]:
        """Error to raise when a write breaks a database constraint."""
        return None

    async def _perform_delete(self, item_id: Any) -> bool:
        return await self.repository.delete(item_id)

    # ----------------- operations ----------------- #
    async def get(self, item_id: Any) -> Optional[T]:
        """Return the item, or None when it does not exist."""
        with storage_errors(f"get {self.entity_name}"):
            return await self.repository.get(item_id)

    async def list(self) -> List[T]:
        with storage_errors(f"list {self.entity_name}"):
            return await self.repository.get_many()

    async def create(self, data: Union[Dict[str, Any], BaseModel]) -> T:
        create_data = self._as_dict(data)
        await self._validate_create(create_data)
        self._prepare_create(create_data)

        with storage_errors(
            f"create {self.entity_name}",
            on_integrity=lambda: self._integrity_failure(create_data),
        ):
            item = await self.repository.create(create_data)
        logger.info("Created %s %s", self.entity_name, item.id)  # type: ignore
        return item

    async def update(self, item_id: Any, data: Union[Dict[str, Any], BaseModel]) -> T:
        update_data = self._as_dict(data)
        update_data.pop("id", None)
        existing_item = await self._get_or_404(item_id)
        await self._validate_update(item_id, update_data, existing_item)
        self._prepare_update(update_data)

        if not update_data:
            return existing_item

        with storage_errors(
            f"update {self.entity_name}",
            on_integrity=lambda: self._integrity_failure(update_data),
        ):
            item = await self.repository.update(item_id, update_data)
        if item is None:
            raise exceptions.NotFoundException(self.entity_name, item_id)
        logger.info("Updated %s %s fields=%s", self.entity_name, item_id, sorted(update_data))
        return item

    async def delete(self, item_id: Any) -> bool:
        existing_item = await self._get_or_404(item_id)
        await self._validate_delete(item_id, existing_item)

        with storage_errors(f"delete {self.entity_name}"):
            deleted = await self._perform_delete(item_id)
        if not deleted:
            raise exceptions.NotFoundException(self.entity_name, item_id)
        logger.info("Deleted %s %s", self.entity_name, item_id)
        return True
