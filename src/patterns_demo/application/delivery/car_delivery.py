"""Car delivery context."""
from typing import Any

from patterns_demo.domain.delivery.strategy import DeliveryStrategy
from patterns_demo.domain.delivery.value_objects import Address, DeliveryQuote
from patterns_demo.infrastructure.logging.logger import get_logger


class CarDelivery:
    """Delivers cars with whichever strategy the caller passes in.

    The context never picks or hardcodes a strategy, so a new delivery
    method needs no change here.
    """

    def __init__(self, logger: Any = None):
        self._logger = logger or get_logger(__name__)

    def deliver_car(self, strategy: DeliveryStrategy, address: Address) -> DeliveryQuote:
        quote = strategy.deliver(address)
        self._logger.info("Delivery quoted", method=quote.method, destination=str(address),
                          cost=str(quote.cost), days=round(quote.days, 2))
        return quote
