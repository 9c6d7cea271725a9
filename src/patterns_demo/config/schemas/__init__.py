"""Configuration schemas."""
from typing import Any, Dict

from .app_schema import AppConfig
from .delivery_schema import DeliveryConfig, DeliveryRateConfig
from .logging_schema import LoggingConfig
from .security_schema import SecurityConfig
from .storage_schema import RepositoryType, StorageConfig
from .view_schema import ViewConfig


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """Validate a raw configuration mapping."""
    return AppConfig.model_validate(config)


__all__ = [
    'AppConfig',
    'validate_config',
    'DeliveryConfig',
    'DeliveryRateConfig',
    'LoggingConfig',
    'SecurityConfig',
    'StorageConfig',
    'RepositoryType',
    'ViewConfig',
]
