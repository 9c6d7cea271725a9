"""
Order resources - the transformation layer between orders and output.

A resource decides which fields of an order reach the outside world and
under which names, so the entity can change shape without breaking output.
Resources are pure: the same order always gives the same output. Anything
time dependent (``generated_at``) must be passed in.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Type

from patterns_demo.domain.base.exceptions import ValidationError
from patterns_demo.domain.order.order_aggregate import Order


class _Missing:
    """Marker for attributes left out by ``when``."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


class JsonResource(ABC):
    """Base class for single-record resources."""

    def __init__(self, resource: Any):
        self.resource = resource
        self._additional: Dict[str, Any] = {}

    @abstractmethod
    def to_array(self) -> Dict[str, Any]:
        """Map the wrapped record to output attributes."""

    @staticmethod
    def when(condition: bool, value: Any) -> Any:
        """Include ``value`` only when ``condition`` holds."""
        return value if condition else MISSING

    def additional(self, data: Dict[str, Any]) -> JsonResource:
        """Add top-level keys next to ``data`` in the response."""
        self._additional.update(data)
        return self

    def resolve(self) -> Dict[str, Any]:
        return {key: value for key, value in self.to_array().items() if value is not MISSING}

    def to_response(self) -> Dict[str, Any]:
        return {"data": self.resolve(), **self._additional}


class OrderResource(JsonResource):
    """Summary view of an order."""

    resource: Order

    def to_array(self) -> Dict[str, Any]:
        order = self.resource
        return {
            "id": order.id,
            "client": order.client,
            "fulfilled": order.fulfilled,
            "created_at": _iso(order.created_at),
            "updated_at": _iso(order.updated_at),
        }


class OrderDetailResource(OrderResource):
    """Full view of an order, including its details payload."""

    def to_array(self) -> Dict[str, Any]:
        order = self.resource
        return {
            **super().to_array(),
            "details": dict(order.details),
            "item_count": len(order.details),
            "status": "fulfilled" if order.fulfilled else "pending",
            "fulfilled_at": self.when(order.fulfilled, _iso(order.updated_at)),
        }


class ResourceCollection:
    """One page of records, each rendered through ``collects``, with pagination links."""

    collects: Type[JsonResource] = OrderResource

    def __init__(self, records: Sequence[Any], page: int = 1, per_page: int = 15,
                 base_url: str = "/orders", collects: Optional[Type[JsonResource]] = None):
        if page < 1:
            raise ValidationError("Page must be at least 1", {"page": ["Must be at least 1"]})
        if per_page < 1:
            raise ValidationError("Page size must be at least 1", {"per_page": ["Must be at least 1"]})
        self.records = list(records)
        self.page = page
        self.per_page = per_page
        self.base_url = base_url
        if collects is not None:
            self.collects = collects
        self._additional: Dict[str, Any] = {}

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    def _url(self, page: int) -> str:
        return f"{self.base_url}?page={page}"

    def page_records(self) -> List[Any]:
        start = (self.page - 1) * self.per_page
        return self.records[start:start + self.per_page]

    def links(self) -> Dict[str, Optional[str]]:
        return {
            "first": self._url(1),
            "last": self._url(self.last_page),
            "prev": self._url(self.page - 1) if self.page > 1 else None,
            "next": self._url(self.page + 1) if self.page < self.last_page else None,
        }

    def meta(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        shown = len(self.page_records())
        start = (self.page - 1) * self.per_page
        meta = {
            "current_page": self.page,
            "per_page": self.per_page,
            "total": self.total,
            "last_page": self.last_page,
            "from": start + 1 if shown else None,
            "to": start + shown if shown else None,
        }
        if now is not None:
            meta["generated_at"] = now.isoformat()
        return meta

    def additional(self, data: Dict[str, Any]) -> ResourceCollection:
        self._additional.update(data)
        return self

    def to_response(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        return {
            "data": [self.collects(record).resolve() for record in self.page_records()],
            "links": self.links(),
            "meta": self.meta(now),
            **self._additional,
        }


class OrderCollection(ResourceCollection):
    collects = OrderResource


def to_view(order: Order, resource: Type[JsonResource] = OrderResource) -> Dict[str, Any]:
    """Project one order through a resource."""
    return resource(order).resolve()


def to_collection_view(orders: Sequence[Order], page: int = 1, per_page: int = 15,
                       base_url: str = "/orders", now: Optional[datetime] = None,
                       resource: Type[JsonResource] = OrderResource) -> Dict[str, Any]:
    """Project a page of orders, wrapped with ``links`` and ``meta``."""
    return OrderCollection(orders, page=page, per_page=per_page, base_url=base_url,
                           collects=resource).to_response(now)
