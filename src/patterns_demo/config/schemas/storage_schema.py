"""Order storage configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field


class RepositoryType(str, Enum):
    """Repository type enumeration."""
    MEMORY = "memory"
    JSON = "json"


class StorageConfig(BaseModel):
    """Which order repository backs the demos."""

    type: RepositoryType = Field(RepositoryType.MEMORY, description="Repository type")
    json_path: str = Field("data/orders.json", description="JSON file used by the json repository")
