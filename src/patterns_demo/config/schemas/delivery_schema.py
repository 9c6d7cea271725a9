"""Delivery strategy configuration schema."""
from decimal import Decimal
from typing import Dict

from pydantic import BaseModel, Field, field_validator


class DeliveryRateConfig(BaseModel):
    """Tariff of one delivery strategy."""

    base_cost: Decimal = Field(..., description="Flat cost of every delivery")
    cost_per_km: Decimal = Field(..., description="Cost added per kilometre")
    speed_km_per_day: float = Field(..., description="Distance covered per day")
    handling_days: float = Field(0, description="Fixed loading and customs time in days")

    @field_validator("base_cost", "cost_per_km")
    @classmethod
    def validate_cost(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Costs cannot be negative")
        return v

    @field_validator("speed_km_per_day")
    @classmethod
    def validate_speed(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Speed must be positive")
        return v

    @field_validator("handling_days")
    @classmethod
    def validate_handling(cls, v: float) -> float:
        if v < 0:
            raise ValueError("Handling time cannot be negative")
        return v


def _default_rates() -> Dict[str, DeliveryRateConfig]:
    return {
        "ship": DeliveryRateConfig(base_cost=Decimal("250.00"), cost_per_km=Decimal("0.40"),
                                   speed_km_per_day=600, handling_days=3),
        "air": DeliveryRateConfig(base_cost=Decimal("900.00"), cost_per_km=Decimal("1.75"),
                                  speed_km_per_day=9000, handling_days=1),
    }


class DeliveryConfig(BaseModel):
    """Delivery strategy tariffs keyed by strategy name."""

    rates: Dict[str, DeliveryRateConfig] = Field(default_factory=_default_rates)
    default_strategy: str = Field("ship", description="Strategy used when none is selected")
