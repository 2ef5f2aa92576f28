from typing import List, Optional, Type
from fastapi import APIRouter, status
from pydantic import BaseModel

from blogapi.core.bases.base_service import BaseService
from blogapi.core.response.handlers import (
    error_response,
    no_content_response,
    success_response,
)
from blogapi.core import exceptions


def _details(e: exceptions.ServiceException):
    return [detail.model_dump() for detail in e.error_details]


class BaseRouter:
    """Base router class with automatic CRUD endpoints."""

    def __init__(
        self,
        service: BaseService,
        tags: Optional[List[str]] = None,
        prefix: str = "",
        create_schema: Optional[Type[BaseModel]] = None,
        update_schema: Optional[Type[BaseModel]] = None
    ):
        self.service = service
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix
        self.create_schema = create_schema
        self.update_schema = update_schema

        # Create router
        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags, #type:ignore
        )

        # Register routes
        self._register_routes()

    def _register_routes(self) -> None:
        """Register all CRUD routes."""
        self._register_list()
        self._register_get_by_id()
        self._register_create()
        self._register_update()
        self._register_delete()

    def _register_list(self) -> None:
        """Register GET "" route."""
        @self.router.get(
            "",
            response_model=None,  # We'll use response handlers instead
            summary="List items",
            responses={
                200: {"description": "Items retrieved successfully"},
            }
        )
        async def list_items():
            result = await self.service.get_list()
            return success_response(data=result["data"])

    def _register_get_by_id(self) -> None:
        """Register GET /{item_id} route."""
        @self.router.get(
            "/{item_id}",
            response_model=None,
            summary="Get item by ID",
            responses={
                200: {"description": "Item retrieved successfully"},
                404: {"description": "Item not found"},
            }
        )
        async def get_by_id(item_id: int):
            try:
                result = await self.service.get_by_id(item_id)
                return success_response(data=result["data"])
            except exceptions.NotFoundException as e:
                return error_response(
                    error_code="NOT_FOUND",
                    message=str(e.detail),
                    status_code=status.HTTP_404_NOT_FOUND
                )

    def _register_create(self) -> None:
        """Register POST "" route."""
        if not self.create_schema:
            return

        @self.router.post(
            "",
            response_model=None,
            status_code=status.HTTP_201_CREATED,
            summary="Create new item",
            responses={
                201: {"description": "Item created successfully"},
                400: {"description": "Missing required field"},
            }
        )
        async def create_item(
            item_data: self.create_schema,  # type: ignore
        ):
            try:
                result = await self.service.create(item_data)
                return success_response(
                    data=result["data"],
                    status_code=status.HTTP_201_CREATED
                )
            except exceptions.ValidationException as e:
                return error_response(
                    error_code="VALIDATION_ERROR",
                    message=str(e.detail),
                    status_code=status.HTTP_400_BAD_REQUEST,
                    details=_details(e)
                )

    def _register_update(self) -> None:
        """Register PUT /{item_id} route."""
        if not self.update_schema:
            return

        @self.router.put(
            "/{item_id}",
            response_model=None,
            summary="Replace item",
            responses={
                200: {"description": "Item updated successfully"},
                400: {"description": "Missing field or mismatched id"},
                404: {"description": "Item not found"},
            }
        )
        async def update_item(
            item_id: int,
            item_data: self.update_schema  # type: ignore
        ):
            try:
                result = await self.service.update(item_id, item_data)
                return success_response(data=result["data"])
            except exceptions.NotFoundException as e:
                return error_response(
                    error_code="NOT_FOUND",
                    message=str(e.detail),
                    status_code=status.HTTP_404_NOT_FOUND
                )
            except exceptions.ValidationException as e:
                return error_response(
                    error_code="VALIDATION_ERROR",
                    message=str(e.detail),
                    status_code=status.HTTP_400_BAD_REQUEST,
                    details=_details(e)
                )

    def _register_delete(self) -> None:
        """Register DELETE /{item_id} route."""
        @self.router.delete(
            "/{item_id}",
            response_model=None,
            status_code=status.HTTP_204_NO_CONTENT,
            summary="Delete item",
            responses={
                204: {"description": "Item deleted"},
                404: {"description": "Item not found"},
            }
        )
        async def delete_item(item_id: int):
            try:
                await self.service.delete(item_id)
                return no_content_response()
            except exceptions.NotFoundException as e:
                return error_response(
                    error_code="NOT_FOUND",
                    message=str(e.detail),
                    status_code=status.HTTP_404_NOT_FOUND
                )

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
