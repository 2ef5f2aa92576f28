import logging
from typing import Any, Dict, Generic, TypeVar, Union

from pydantic import BaseModel
from sqlmodel import SQLModel

from blogapi.core.bases.base_repository import BaseRepository
from blogapi.core.exceptions import NotFoundException

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


class BaseService(Generic[T]):
    """Base service wrapping a repository with validation hooks.

    Every operation returns ``{"data": ..., "message": ...}`` so routers can
    render results uniformly. Repository exceptions propagate unchanged.
    """

    def __init__(self, repository: BaseRepository[T]):
        self.repository = repository

    @property
    def model_name(self) -> str:
        return self.repository.model.__name__

    async def get_list(self) -> Dict[str, Any]:
        items = self.repository.list()
        return {"data": items, "message": f"{len(items)} {self.model_name}(s) retrieved"}

    async def get_by_id(self, item_id: Any) -> Dict[str, Any]:
        try:
            item = self.repository.get(item_id)
        except NotFoundException:
            logger.warning("%s %s not found", self.model_name, item_id)
            raise
        return {"data": item, "message": f"{self.model_name} retrieved successfully"}

    async def create(self, obj_in: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        data = self._as_dict(obj_in)
        await self._validate_create(data)
        item = self.repository.create(data)
        return {"data": item, "message": f"{self.model_name} created successfully"}

    async def update(
        self, item_id: Any, obj_in: Union[Dict[str, Any], BaseModel]
    ) -> Dict[str, Any]:
        data = self._as_dict(obj_in)
        try:
            existing = self.repository.get(item_id)
        except NotFoundException:
            logger.warning("%s %s not found for update", self.model_name, item_id)
            raise
        await self._validate_update(item_id, data, existing)
        item = self.repository.update(item_id, data)
        return {"data": item, "message": f"{self.model_name} updated successfully"}

    async def delete(self, item_id: Any) -> Dict[str, Any]:
        try:
            existing = self.repository.get(item_id)
        except NotFoundException:
            logger.warning("%s %s not found for delete", self.model_name, item_id)
            raise
        await self._validate_delete(item_id, existing)
        self.repository.delete(item_id)
        return {"data": None, "message": f"{self.model_name} deleted successfully"}

    @staticmethod
    def _as_dict(obj_in: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        if isinstance(obj_in, BaseModel):
            return obj_in.model_dump(exclude_unset=True)
        return dict(obj_in)

    # ----------------- hooks ----------------- #
    async def _validate_create(self, create_data: Dict[str, Any]) -> None:
        pass

    async def _validate_update(
        self, item_id: Any, update_data: Dict[str, Any], existing_item: T
    ) -> None:
        pass

    async def _validate_delete(self, item_id: Any, existing_item: T) -> None:
        pass
