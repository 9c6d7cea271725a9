"""Order entity - the record shared by every demo."""
from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from patterns_demo.domain.base.entity import Entity
from patterns_demo.domain.base.exceptions import field_errors
from patterns_demo.domain.order.exceptions import OrderValidationError


class Order(Entity):
    """A client order.

    The identifier is assigned once by the repository and never changes.
    Every other field is changed only through ``apply_changes``, which the
    repository calls from its ``update`` operation.
    """

    id: Optional[int] = None
    client: str
    details: Dict[str, Any] = Field(default_factory=dict)
    fulfilled: bool = False

    UPDATABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("client", "details", "fulfilled")

    @classmethod
    def create(cls, order_id: int, data: Mapping[str, Any], now: datetime) -> Order:
        """Build a new order from caller supplied data.

        Raises:
            OrderValidationError: If the data has unknown fields or wrong types
        """
        unknown = [key for key in data if key not in cls.UPDATABLE_FIELDS]
        if unknown:
            raise OrderValidationError(
                "Unknown order fields",
                {key: ["Field is not part of an order"] for key in unknown},
            )
        try:
            return cls(id=order_id, created_at=now, updated_at=now, **dict(data))
        except PydanticValidationError as e:
            raise OrderValidationError("Invalid order data", field_errors(e))

    def apply_changes(self, changes: Mapping[str, Any], now: datetime) -> None:
        """Merge ``changes`` into this order.

        Top-level fields not named in ``changes`` are left alone. The
        ``details`` mapping is merged key by key rather than replaced.
        """
        errors: Dict[str, List[str]] = {}
        for key, value in changes.items():
            if key == "id" and value != self.id:
                errors["id"] = ["Order identifier cannot be changed"]
            elif key != "id" and key not in self.UPDATABLE_FIELDS:
                errors[key] = ["Field is not part of an order"]
        if "details" in changes and not isinstance(changes["details"], Mapping):
            errors["details"] = ["Details must be a mapping"]
        if errors:
            raise OrderValidationError(f"Invalid update for order {self.id}", errors)

        merged = self.model_dump()
        for key, value in changes.items():
            if key == "details":
                merged["details"] = {**self.details, **dict(value)}
            elif key != "id":
                merged[key] = value
        merged["updated_at"] = now

        try:
            validated = Order.model_validate(merged)
        except PydanticValidationError as e:
            raise OrderValidationError(f"Invalid update for order {self.id}", field_errors(e))

        self.client = validated.client
        self.details = validated.details
        self.fulfilled = validated.fulfilled
        self.updated_at = validated.updated_at
