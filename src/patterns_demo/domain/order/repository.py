"""Order repository interface - contract for order data access."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping

from .exceptions import OrderValidationError
from .order_aggregate import Order


class OrderRepository(ABC):
    """Repository interface for orders.

    Callers depend on this contract only. Implementations decide where the
    orders live (process memory, a JSON file, ...) and must raise
    ``OrderNotFoundError`` for every operation addressed to a missing id.
    """

    @abstractmethod
    def list_all(self) -> List[Order]:
        """Return every stored order, ordered by id."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order:
        """
        Get an order by id.

        Raises:
            OrderNotFoundError: If no order has this id
        """

    @abstractmethod
    def create(self, details: Mapping[str, Any]) -> Order:
        """Assign a new id, store and return the order built from ``details``."""

    @abstractmethod
    def update(self, order_id: int, new_details: Mapping[str, Any]) -> Order:
        """
        Merge ``new_details`` into the stored order and return it.

        Raises:
            OrderNotFoundError: If no order has this id
        """

    @abstractmethod
    def delete(self, order_id: int) -> None:
        """
        Remove an order.

        Raises:
            OrderNotFoundError: If no order has this id
        """

    @abstractmethod
    def exists(self, order_id: int) -> bool:
        """Check whether an order with this id is stored."""

    def find_by_criteria(self, criteria: Dict[str, Any]) -> List[Order]:
        """
        Find orders whose fields equal every value in ``criteria``.

        Raises:
            OrderValidationError: If a criterion names a field orders do not have
        """
        unknown = sorted(field for field in criteria if field not in Order.model_fields)
        if unknown:
            raise OrderValidationError(
                f"Unknown order fields in criteria: {', '.join(unknown)}",
                {field: ["Orders have no such field"] for field in unknown},
            )
        return [
            order for order in self.list_all()
            if all(getattr(order, field) == value for field, value in criteria.items())
        ]

    def get_fulfilled(self) -> List[Order]:
        """Return the orders whose fulfillment flag is set."""
        return self.find_by_criteria({"fulfilled": True})
