"""Order application layer - service and output resources."""
from .resources import (
    OrderCollection,
    OrderDetailResource,
    OrderResource,
    to_collection_view,
    to_view,
)
from .service import OrderService

__all__ = [
    'OrderService',
    'OrderResource',
    'OrderDetailResource',
    'OrderCollection',
    'to_view',
    'to_collection_view',
]
