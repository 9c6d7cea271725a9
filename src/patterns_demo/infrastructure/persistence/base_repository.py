# src/patterns_demo/infrastructure/persistence/base_repository.py
import threading
from abc import abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional

from patterns_demo.domain.order.exceptions import OrderNotFoundError
from patterns_demo.domain.order.order_aggregate import Order
from patterns_demo.domain.order.repository import OrderRepository
from patterns_demo.infrastructure.logging.logger import get_logger

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseOrderRepository(OrderRepository):
    """
    Shared implementation of the order repository contract.

    Provides:
    - Sequential id assignment starting at 1
    - Merge semantics for updates
    - NotFound checks for get, update and delete
    - Audit logging of every mutation

    Storage backends only implement the primitive ``_load_all``, ``_store``,
    ``_remove`` and ``_next_id`` hooks. Every returned order is a copy, so the
    stored record only changes through ``update``.
    """

    def __init__(self, clock: Optional[Clock] = None, logger: Any = None):
        self._lock = threading.RLock()
        self._clock = clock or utc_now
        self._logger = logger or get_logger(self.__class__.__name__)

    @abstractmethod
    def _load_all(self) -> List[Order]:
        """Load every stored order."""

    @abstractmethod
    def _load(self, order_id: int) -> Optional[Order]:
        """Load a single order, or None when it is absent."""

    @abstractmethod
    def _store(self, order: Order) -> None:
        """Insert or replace an order."""

    @abstractmethod
    def _remove(self, order_id: int) -> bool:
        """Remove an order and report whether it existed."""

    @abstractmethod
    def _next_id(self) -> int:
        """Reserve the next unused order id."""

    @staticmethod
    def _normalize_id(order_id: Any) -> Optional[int]:
        """Integer ids and their decimal string form address the same order; anything else addresses none."""
        if isinstance(order_id, bool):
            return None
        if isinstance(order_id, int):
            return order_id
        if isinstance(order_id, str) and order_id.strip().isdecimal():
            return int(order_id)
        return None

    def _find(self, order_id: Any) -> Optional[Order]:
        key = self._normalize_id(order_id)
        return None if key is None else self._load(key)

    def list_all(self) -> List[Order]:
        with self._lock:
            orders = self._load_all()
        return [order.model_copy(deep=True) for order in sorted(orders, key=lambda o: o.id)]

    def get_by_id(self, order_id: int) -> Order:
        with self._lock:
            order = self._find(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order.model_copy(deep=True)

    def exists(self, order_id: int) -> bool:
        with self._lock:
            return self._find(order_id) is not None

    def create(self, details: Mapping[str, Any]) -> Order:
        with self._lock:
            order = Order.create(self._next_id(), details, self._clock())
            self._store(order)
        self._logger.info("Order created", order_id=order.id, client=order.client)
        return order.model_copy(deep=True)

    def update(self, order_id: int, new_details: Mapping[str, Any]) -> Order:
        with self._lock:
            order = self._find(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)
            order.apply_changes(new_details, self._clock())
            self._store(order)
        self._logger.info("Order updated", order_id=order.id, fields=sorted(new_details))
        return order.model_copy(deep=True)

    def delete(self, order_id: int) -> None:
        key = self._normalize_id(order_id)
        with self._lock:
            if key is None or not self._remove(key):
                raise OrderNotFoundError(order_id)
        self._logger.info("Order deleted", order_id=key)
