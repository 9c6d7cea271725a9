# src/patterns_demo/infrastructure/persistence/json_repository.py
import fcntl
import json
import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from pydantic import ValidationError as PydanticValidationError

from patterns_demo.domain.order.order_aggregate import Order
from patterns_demo.infrastructure.persistence.base_repository import BaseOrderRepository, Clock
from patterns_demo.infrastructure.persistence.exceptions import StorageError


class JSONOrderRepository(BaseOrderRepository):
    """
    JSON file implementation of the order repository.

    Storage structure:
    {
        "next_id": 3,
        "orders": {
            "1": { order_data },
            "2": { order_data }
        }
    }

    Every primitive re-reads the file under an exclusive ``fcntl`` lock, so
    two repositories pointed at the same path see each other's writes.
    """

    def __init__(self, storage_path: str, clock: Optional[Clock] = None, logger: Any = None):
        """
        Initialize JSON repository.

        Args:
            storage_path: Path to JSON storage file
            clock: Callable returning the current time, used for timestamps
            logger: Optional injected logger
        """
        super().__init__(clock=clock, logger=logger)
        self._storage_path = storage_path
        self._ensure_storage()

    @staticmethod
    def _empty() -> Dict[str, Any]:
        return {"next_id": 1, "orders": {}}

    def _ensure_storage(self) -> None:
        """
        Ensure storage file exists with proper structure.

        Raises:
            StorageError: If storage initialization fails
        """
        try:
            directory = os.path.dirname(self._storage_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            if not os.path.exists(self._storage_path):
                with open(self._storage_path, 'w') as f:
                    json.dump(self._empty(), f, indent=2)
        except OSError as e:
            raise StorageError(f"Failed to initialize storage: {str(e)}")

    @contextmanager
    def _locked_data(self, write: bool = False) -> Iterator[Dict[str, Any]]:
        """
        Yield the file contents with an exclusive lock held.

        When ``write`` is set, the (possibly modified) data is written back
        before the lock is released.
        """
        try:
            with open(self._storage_path, 'r+') as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                try:
                    try:
                        data = json.load(f)
                    except json.JSONDecodeError:
                        # Empty or corrupted file, start over
                        data = self._empty()
                    if not isinstance(data, dict) or "orders" not in data:
                        data = self._empty()

                    yield data

                    if write:
                        f.seek(0)
                        f.truncate()
                        json.dump(data, f, indent=2)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except OSError as e:
            raise StorageError(f"Failed to access storage {self._storage_path}: {str(e)}")

    def _deserialize(self, order_data: Dict[str, Any]) -> Order:
        try:
            return Order.model_validate(order_data)
        except PydanticValidationError as e:
            raise StorageError(f"Corrupt order record in {self._storage_path}: {str(e)}")

    def _load_all(self) -> List[Order]:
        with self._locked_data() as data:
            return [self._deserialize(item) for item in data["orders"].values()]

    def _load(self, order_id: int) -> Optional[Order]:
        with self._locked_data() as data:
            order_data = data["orders"].get(str(order_id))
        return self._deserialize(order_data) if order_data is not None else None

    def _store(self, order: Order) -> None:
        with self._locked_data(write=True) as data:
            data["orders"][str(order.id)] = order.model_dump(mode="json")

    def _remove(self, order_id: int) -> bool:
        with self._locked_data(write=True) as data:
            return data["orders"].pop(str(order_id), None) is not None

    def _next_id(self) -> int:
        with self._locked_data(write=True) as data:
            order_id = int(data.get("next_id", 1))
            data["next_id"] = order_id + 1
        return order_id
