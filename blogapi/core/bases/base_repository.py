import copy
import logging
import threading
from typing import Any, Dict, Generic, List, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError
from sqlmodel import SQLModel

from blogapi.core.exceptions import NotFoundException, ValidationException
from blogapi.core.response.schemas import ErrorDetail

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """In-memory, insertion-ordered collection with integer id assignment.

    Every public method takes the same lock, so a create can never interleave
    with an update or delete on another thread. Callers only ever see copies
of the stored items.

    Updates are full replacements: the stored item is rebuilt from the new
    payload plus its existing id, so fields missing from the payload are gone
    afterwards.
    """

    model: Type[T]
    required_fields: Sequence[str] = ()

    def __init__(self, start_id: int = 1):
        self._items: List[T] = []
        self._next_id = start_id
        self._lock = threading.RLock()

    # ----------------- helpers ----------------- #
    @staticmethod
    def _to_dict(obj_in: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        if isinstance(obj_in, BaseModel):
            data = obj_in.model_dump(exclude_unset=True)
        else:
            data = copy.deepcopy(dict(obj_in))
        # The id is owned by the repository, never by the payload
        data.pop("id", None)
        return data

    def _check_required(self, data: Dict[str, Any], operation: str) -> None:
        missing = [name for name in self.required_fields if name not in data]
        if missing:
            logger.warning(
                "%s %s rejected, missing fields: %s",
                self.model.__name__, operation, ", ".join(missing),
            )
            raise ValidationException(
                f"Missing required field(s): {', '.join(missing)}",
                error_details=[
                    ErrorDetail(
                        field=name,
                        code="MISSING",
                        message=f"Missing `{name}` in request body",
                        target="body",
                    )
                    for name in missing
                ],
            )

    def _build(self, item_id: Any, data: Dict[str, Any], operation: str) -> T:
        try:
            return self.model(id=item_id, **data)
        except ValidationError as e:
            logger.warning("%s %s rejected: %s", self.model.__name__, operation, e)
            raise ValidationException(
                f"Invalid {self.model.__name__} data",
                error_details=[
                    ErrorDetail(
                        field=".".join(str(p) for p in err["loc"]),
                        code=str(err["type"]).upper(),
                        message=err["msg"],
                        target="body",
                    )
                    for err in e.errors()
                ],
            ) from e

    def _index_of(self, item_id: Any) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:  # type: ignore
                return index
        raise NotFoundException(f"{self.model.__name__} with id {item_id} not found")

    # ----------------- CRUD ----------------- #
    def list(self) -> List[T]:
        """Return every item in insertion order."""
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items]

    def get(self, item_id: Any) -> T:
        with self._lock:
            return self._items[self._index_of(item_id)].model_copy(deep=True)

    def create(self, obj_in: Union[Dict[str, Any], BaseModel]) -> T:
        """Assign a fresh id to the payload and append it."""
        data = self._to_dict(obj_in)
        with self._lock:
            self._check_required(data, "create")
            obj = self._build(self._next_id, data, "create")
            self._next_id += 1
            self._items.append(obj)
        logger.info("Created %s %s", self.model.__name__, obj.id)  # type: ignore
        return obj.model_copy(deep=True)

    def update(self, item_id: Any, obj_in: Union[Dict[str, Any], BaseModel]) -> T:
        """Replace everything but the id of an existing item."""
        data = self._to_dict(obj_in)
        with self._lock:
            index = self._index_of(item_id)
            self._check_required(data, "update")
            obj = self._build(self._items[index].id, data, "update")  # type: ignore
            self._items[index] = obj
        logger.info("Updated %s %s", self.model.__name__, item_id)
        return obj.model_copy(deep=True)

    def delete(self, item_id: Any) -> None:
        with self._lock:
            del self._items[self._index_of(item_id)]
        logger.info("Deleted %s %s", self.model.__name__, item_id)

    def exists(self, item_id: Any) -> bool:
        with self._lock:
            return any(item.id == item_id for item in self._items)  # type: ignore

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def create_many(self, objects_in: List[Union[Dict[str, Any], BaseModel]]) -> List[T]:
        """Create multiple items at once."""
        with self._lock:
            return [self.create(obj) for obj in objects_in]
