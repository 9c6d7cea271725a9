"""Order application service."""
from typing import Any, Dict, List, Mapping

from patterns_demo.domain.order.order_aggregate import Order
from patterns_demo.domain.order.repository import OrderRepository
from patterns_demo.infrastructure.logging.logger import get_logger


class OrderService:
    """Use cases over orders.

    Depends on the ``OrderRepository`` contract only; the storage behind it is
    chosen by whoever builds the service.
    """

    def __init__(self, repository: OrderRepository, logger: Any = None):
        self._repository = repository
        self._logger = logger or get_logger(__name__)

    def place_order(self, client: str, details: Mapping[str, Any]) -> Order:
        return self._repository.create({"client": client, "details": dict(details)})

    def get_order(self, order_id: int) -> Order:
        return self._repository.get_by_id(order_id)

    def list_orders(self) -> List[Order]:
        return self._repository.list_all()

    def amend_order(self, order_id: int, changes: Mapping[str, Any]) -> Order:
        return self._repository.update(order_id, changes)

    def fulfill_order(self, order_id: int) -> Order:
        order = self._repository.update(order_id, {"fulfilled": True})
        self._logger.info("Order fulfilled", order_id=order_id)
        return order

    def cancel_order(self, order_id: int) -> None:
        self._repository.delete(order_id)

    def fulfilled_orders(self) -> List[Order]:
        return self._repository.get_fulfilled()

    def orders_for_client(self, client: str) -> List[Order]:
        return self._repository.find_by_criteria({"client": client})

    def summary(self) -> Dict[str, int]:
        orders = self._repository.list_all()
        fulfilled = sum(1 for order in orders if order.fulfilled)
        return {"total": len(orders), "fulfilled": fulfilled, "pending": len(orders) - fulfilled}
