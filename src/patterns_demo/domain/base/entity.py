"""Base domain entities - foundation for all domain objects."""
from typing import Any, Optional
from abc import ABC
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class Entity(BaseModel, ABC):
    """Base class for all domain entities."""
    model_config = ConfigDict(
        frozen=False,  # Entities are mutable
        validate_assignment=True,
        arbitrary_types_allowed=True
    )

    id: Optional[Any] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID, type and state."""
        if not isinstance(other, self.__class__):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__, self.id))
