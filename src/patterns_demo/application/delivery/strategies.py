"""Concrete delivery strategies."""
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Type

from patterns_demo.config.schemas.delivery_schema import DeliveryConfig, DeliveryRateConfig
from patterns_demo.domain.base.exceptions import ConfigurationError
from patterns_demo.domain.delivery.strategy import DeliveryStrategy
from patterns_demo.domain.delivery.value_objects import Address, DeliveryQuote

CENTS = Decimal("0.01")


class TariffDeliveryStrategy(DeliveryStrategy):
    """Quotes ``base + distance * per_km`` and ``handling + distance / speed``.

    Each instance owns its tariff; strategies share nothing.
    """

    def __init__(self, rates: DeliveryRateConfig):
        self._rates = rates

    @property
    def rates(self) -> DeliveryRateConfig:
        return self._rates

    def deliver(self, address: Address) -> DeliveryQuote:
        distance = Decimal(str(address.distance_km))
        cost = (self._rates.base_cost + self._rates.cost_per_km * distance).quantize(CENTS, ROUND_HALF_UP)
        days = self._rates.handling_days + address.distance_km / self._rates.speed_km_per_day
        return DeliveryQuote(method=self.name, cost=cost, duration=timedelta(days=days))


class ShipDelivery(TariffDeliveryStrategy):
    """Sea freight: cheap per kilometre, slow, long port handling."""
    name = "ship"


class AirDelivery(TariffDeliveryStrategy):
    """Air freight: expensive, fast."""
    name = "air"


STRATEGY_TYPES: Dict[str, Type[TariffDeliveryStrategy]] = {
    ShipDelivery.name: ShipDelivery,
    AirDelivery.name: AirDelivery,
}


def build_delivery_strategies(config: DeliveryConfig) -> Dict[str, DeliveryStrategy]:
    """
    Instantiate one strategy per configured tariff.

    Raises:
        ConfigurationError: If a tariff names an unknown strategy
    """
    strategies: Dict[str, DeliveryStrategy] = {}
    for name, rates in config.rates.items():
        strategy_type = STRATEGY_TYPES.get(name)
        if strategy_type is None:
            raise ConfigurationError(
                f"Unknown delivery strategy '{name}', expected one of {sorted(STRATEGY_TYPES)}"
            )
        strategies[name] = strategy_type(rates)
    return strategies
