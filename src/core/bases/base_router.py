from typing import Any, Callable, List, Optional, Type
from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel

from src.core.bases.base_service import BaseService
from src.core.database import Database
from src.core.response.handlers import (
    error_response,
    list_response,
    service_error_response,
    success_response,
)
from src.core.response.schemas import DeleteResult
from src.core import exceptions


class BaseRouter:
    """Base router class with automatic CRUD endpoints."""

    def __init__(
        self,
        service_factory: Callable[[Database], BaseService],
        read_schema: Type[BaseModel],
        tags: Optional[List[str]] = None,
        prefix: str = "",
        create_schema: Optional[Type[BaseModel]] = None,
        update_schema: Optional[Type[BaseModel]] = None,
        detail_schema: Optional[Type[BaseModel]] = None,
        entity_name: Optional[str] = None,
    ):
        self.service_factory = service_factory
        self.read_schema = read_schema
        # Schema for get/list results when they carry joined data.
        self.detail_schema = detail_schema or read_schema
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.entity_name = entity_name or self.tags[0].rstrip("s")

        # Create router
        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags, #type:ignore
        )

        # Register routes
        self._register_routes()

    def get_service(self, request: Request) -> BaseService:
        """Build the service around the app's database."""
        return self.service_factory(request.app.state.database)

    def _serialize(self, item: Any, schema: Optional[Type[BaseModel]] = None) -> dict:
        schema = schema or self.read_schema
        return schema.model_validate(item).model_dump(mode="json")

    def _register_routes(self) -> None:
        """Register all CRUD routes."""
        self._register_get_by_id()
        self._register_list()
        self._register_create()
        self._register_update()
        self._register_delete()

    def _register_get_by_id(self) -> None:
        """Register GET /{item_id} route."""
        @self.router.get(
            "/{item_id}",
            response_model=None,  # We'll use response handlers instead
            summary=f"Get {self.entity_name.lower()} by ID",
            responses={
                200: {"description": "Item retrieved successfully"},
                404: {"description": "Item not found"},
                500: {"description": "Internal server error"}
            }
        )
        async def get_by_id(
            item_id: int,
            service: BaseService = Depends(self.get_service),
        ):
            try:
                item = await service.get(item_id)
            except exceptions.ServiceException as e:
                return service_error_response(e)
            if item is None:
                return error_response(
                    error_code="NOT_FOUND",
                    message=f"{self.entity_name} with id {item_id} not found",
                    status_code=status.HTTP_404_NOT_FOUND
                )
            return success_response(
                data=self._serialize(item, self.detail_schema),
                message=f"{self.entity_name} retrieved successfully"
            )

    def _register_list(self) -> None:
        """Register GET / route."""
        @self.router.get(
            "/",
            summary=f"List {self.entity_name.lower()}s",
            responses={
                200: {"description": "Items retrieved successfully"},
                500: {"description": "Internal server error"}
            }
        )
        async def list_items(service: BaseService = Depends(self.get_service)):
            try:
                items = await service.list()
            except exceptions.ServiceException as e:
                return service_error_response(e)
            return list_response(
                items=[self._serialize(item, self.detail_schema) for item in items],
                message=f"{self.entity_name}s retrieved successfully"
            )

    def _register_create(self) -> None:
        """Register POST / route."""
        if not self.create_schema:
            return

        @self.router.post(
            "/",
            status_code=status.HTTP_201_CREATED,
            summary=f"Create {self.entity_name.lower()}",
            responses={
                201: {"description": "Item created successfully"},
                404: {"description": "Referenced item not found"},
                422: {"description": "Validation error"},
                500: {"description": "Internal server error"}
            }
        )
        async def create_item(
            item_data: self.create_schema,  # type: ignore
            service: BaseService = Depends(self.get_service),
        ):
            try:
                item = await service.create(item_data)
            except exceptions.ServiceException as e:
                return service_error_response(e)
            return success_response(
                data=self._serialize(item),
                message=f"{self.entity_name} created successfully",
                status_code=status.HTTP_201_CREATED
            )

    def _register_update(self) -> None:
        """Register PUT /{item_id} route."""
        if not self.update_schema:
            return

        @self.router.put(
            "/{item_id}",
            summary=f"Update {self.entity_name.lower()}",
            responses={
                200: {"description": "Item updated successfully"},
                404: {"description": "Item not found"},
                422: {"description": "Validation error"},
                500: {"description": "Internal server error"}
            }
        )
        async def update_item(
            item_id: int,
            item_data: self.update_schema,  # type: ignore
            service: BaseService = Depends(self.get_service),
        ):
            try:
                item = await service.update(item_id, item_data)
            except exceptions.ServiceException as e:
                return service_error_response(e)
            return success_response(
                data=self._serialize(item),
                message=f"{self.entity_name} updated successfully"
            )

    def _register_delete(self) -> None:
        """Register DELETE /{item_id} route."""
        @self.router.delete(
            "/{item_id}",
            summary=f"Delete {self.entity_name.lower()}",
            responses={
                200: {"description": "Item deleted successfully"},
                404: {"description": "Item not found"},
                500: {"description": "Internal server error"}
            }
        )
        async def delete_item(
            item_id: int,
            service: BaseService = Depends(self.get_service),
        ):
            try:
                deleted = await service.delete(item_id)
            except exceptions.ServiceException as e:
                return service_error_response(e)
            return success_response(
                data=DeleteResult(success=deleted).model_dump(),
                message=f"{self.entity_name} deleted successfully"
            )

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
