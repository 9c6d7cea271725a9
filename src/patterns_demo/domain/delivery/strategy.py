"""Delivery strategy interface."""
from abc import ABC, abstractmethod

from .value_objects import Address, DeliveryQuote


class DeliveryStrategy(ABC):
    """Interchangeable algorithm that quotes a delivery to an address."""

    name: str = "delivery"

    @abstractmethod
    def deliver(self, address: Address) -> DeliveryQuote:
        """Quote cost and duration for delivering to ``address``."""
