# src/patterns_demo/domain/delivery/value_objects.py
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from typing import Any, Dict

from patterns_demo.domain.base.exceptions import ValidationError


@dataclass(frozen=True)
class Address:
    """Delivery destination.

    The location text is opaque to the strategies; they only look at the
    distance from the depot.
    """
    location: str
    distance_km: float = 0.0

    def __post_init__(self):
        if not isinstance(self.location, str) or not self.location.strip():
            raise ValidationError("Address location is required",
                                  {"location": ["Location must be a non-empty string"]})
        if self.distance_km < 0:
            raise ValidationError("Distance cannot be negative",
                                  {"distance_km": ["Distance must be zero or positive"]})

    def __str__(self) -> str:
        return self.location


@dataclass(frozen=True)
class DeliveryQuote:
    """Cost and duration of delivering to an address with one strategy."""
    method: str
    cost: Decimal
    duration: timedelta

    def __post_init__(self):
        if self.cost < 0:
            raise ValidationError("Delivery cost cannot be negative", {"cost": ["Must be zero or positive"]})
        if self.duration < timedelta(0):
            raise ValidationError("Delivery duration cannot be negative", {"duration": ["Must be zero or positive"]})

    @property
    def days(self) -> float:
        return self.duration.total_seconds() / 86400

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "cost": str(self.cost),
            "duration_days": round(self.days, 2),
        }
