"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from .delivery_schema import DeliveryConfig
from .logging_schema import LoggingConfig
from .security_schema import SecurityConfig
from .storage_schema import StorageConfig
from .view_schema import ViewConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    delivery: DeliveryConfig = Field(default_factory=DeliveryConfig)
    views: ViewConfig = Field(default_factory=ViewConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    @model_validator(mode="after")
    def ensure_default_strategy(self) -> "AppConfig":
        """The default delivery strategy must have a tariff."""
        if self.delivery.default_strategy not in self.delivery.rates:
            raise ValueError(
                f"Default delivery strategy '{self.delivery.default_strategy}' has no configured rates"
            )
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)
