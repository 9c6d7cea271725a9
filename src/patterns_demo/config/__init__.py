"""Configuration package with clean public API."""
from .schemas import (
    AppConfig, validate_config,
    DeliveryConfig, DeliveryRateConfig,
    LoggingConfig, SecurityConfig,
    RepositoryType, StorageConfig, ViewConfig,
)
from .manager import ConfigurationManager

__all__ = [
    'AppConfig',
    'validate_config',
    'DeliveryConfig',
    'DeliveryRateConfig',
    'LoggingConfig',
    'SecurityConfig',
    'RepositoryType',
    'StorageConfig',
    'ViewConfig',
    'ConfigurationManager',
]
