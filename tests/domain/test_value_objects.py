"""Tests for car and delivery value objects."""
from datetime import timedelta
from decimal import Decimal

import pytest

from patterns_demo.domain.base.exceptions import ValidationError
from patterns_demo.domain.car import Car
from patterns_demo.domain.delivery import Address, DeliveryQuote


class TestCar:

    def test_components_are_read_only(self):
        car = Car(components={"battery": "lithium-ion"})

        with pytest.raises(TypeError):
            car.components["battery"] = "lead-acid"

    def test_source_mapping_changes_do_not_leak(self):
        components = {"battery": "lithium-ion"}
        car = Car(components=components)
        components["battery"] = "lead-acid"

        assert car.component("battery") == "lithium-ion"

    def test_empty_components_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Car(components={})
        assert exc.value.fields == ["components"]

    def test_blank_component_name_rejected(self):
        with pytest.raises(ValidationError):
            Car(components={"": "x"})


class TestAddress:

    def test_blank_location_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Address("  ")
        assert exc.value.fields == ["location"]

    def test_negative_distance_rejected(self):
        with pytest.raises(ValidationError):
            Address("Oslo", distance_km=-1)

    def test_str_is_location(self):
        assert str(Address("Oslo", 10)) == "Oslo"


class TestDeliveryQuote:

    def test_to_dict(self):
        quote = DeliveryQuote(method="ship", cost=Decimal("12.50"), duration=timedelta(days=1, hours=12))

        assert quote.to_dict() == {"method": "ship", "cost": "12.50", "duration_days": 1.5}

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            DeliveryQuote(method="ship", cost=Decimal("-1"), duration=timedelta(days=1))
