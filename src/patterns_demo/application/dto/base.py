"""Base DTO classes with a stable snake_case API."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs.

    Provides stable ``to_dict()``/``from_dict()`` methods so callers never
    touch the pydantic API directly.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BaseDTO':
        return cls.model_validate(data)


class BaseRequest(BaseDTO):
    """Base class for inbound request DTOs."""
    model_config = ConfigDict(frozen=True, extra="ignore")


class BaseResponse(BaseDTO):
    """Base class for response DTOs."""
    success: bool = True
    message: Optional[str] = None
    metadata: Dict[str, Any] = {}
