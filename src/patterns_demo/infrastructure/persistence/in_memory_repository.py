"""In-memory order repository - a dictionary standing in for a database."""
from itertools import count
from typing import Any, Dict, List, Optional

from patterns_demo.domain.order.order_aggregate import Order
from patterns_demo.infrastructure.persistence.base_repository import BaseOrderRepository, Clock


class InMemoryOrderRepository(BaseOrderRepository):
    """Order repository backed by a dictionary that lives as long as the process."""

    def __init__(self, clock: Optional[Clock] = None, logger: Any = None):
        super().__init__(clock=clock, logger=logger)
        self._orders: Dict[int, Order] = {}
        self._ids = count(1)

    def _load_all(self) -> List[Order]:
        return list(self._orders.values())

    def _load(self, order_id: int) -> Optional[Order]:
        order = self._orders.get(order_id)
        return order.model_copy(deep=True) if order is not None else None

    def _store(self, order: Order) -> None:
        self._orders[order.id] = order.model_copy(deep=True)

    def _remove(self, order_id: int) -> bool:
        return self._orders.pop(order_id, None) is not None

    def _next_id(self) -> int:
        return next(self._ids)
