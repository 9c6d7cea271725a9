"""Order domain - entity, repository contract and exceptions."""
from .exceptions import OrderNotFoundError, OrderValidationError
from .order_aggregate import Order
from .repository import OrderRepository

__all__ = ['Order', 'OrderRepository', 'OrderNotFoundError', 'OrderValidationError']
