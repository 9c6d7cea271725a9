"""Delivery application layer - the car delivery context and its strategies."""
from .car_delivery import CarDelivery
from .strategies import (
    AirDelivery,
    ShipDelivery,
    TariffDeliveryStrategy,
    build_delivery_strategies,
)

__all__ = [
    'CarDelivery',
    'AirDelivery',
    'ShipDelivery',
    'TariffDeliveryStrategy',
    'build_delivery_strategies',
]
