"""Delivery domain - address, quote and the strategy contract."""
from .strategy import DeliveryStrategy
from .value_objects import Address, DeliveryQuote

__all__ = ['Address', 'DeliveryQuote', 'DeliveryStrategy']
