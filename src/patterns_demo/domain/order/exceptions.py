"""Order domain exceptions."""
from typing import Any

from patterns_demo.domain.base.exceptions import EntityNotFoundError, ValidationError


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id: Any):
        super().__init__("Order", order_id)


class OrderValidationError(ValidationError):
    """Raised when order data fails validation."""
