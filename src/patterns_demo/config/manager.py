"""Configuration management for the application."""
from __future__ import annotations
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from patterns_demo.config.schemas import (
    AppConfig,
    DeliveryConfig,
    LoggingConfig,
    SecurityConfig,
    StorageConfig,
    ViewConfig,
)
from patterns_demo.config.utils.env_expansion import expand_config_env_vars
from patterns_demo.domain.base.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERNS_DEMO_"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}STORAGE_TYPE": ("storage", "type"),
    f"{ENV_PREFIX}STORAGE_PATH": ("storage", "json_path"),
    f"{ENV_PREFIX}TEMPLATES_DIR": ("views", "templates_dir"),
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is loaded lazily from:
    - the JSON file passed to the constructor, if any
    - ``PATTERNS_DEMO_*`` environment variable overrides
    - explicit overrides passed to the constructor
    - schema defaults for everything else
    """

    _TYPE_MAPPING = {
        LoggingConfig: 'logging',
        StorageConfig: 'storage',
        DeliveryConfig: 'delivery',
        ViewConfig: 'views',
        SecurityConfig: 'security',
    }

    def __init__(self, config_file: Optional[str] = None,
                 overrides: Optional[Dict[str, Dict[str, Any]]] = None):
        """Initialize configuration manager with lazy loading.

        Args:
            config_file: Optional JSON configuration file
            overrides: Section values applied last, e.g. from command line flags
        """
        self._config_file = config_file
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self._load_file(self._config_file)

        config_data = expand_config_env_vars(config_data)
        config_data = self._apply_environment_overrides(config_data)
        for section, values in self._overrides.items():
            config_data[section] = {**(config_data.get(section) or {}), **values}

        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    def _load_file(self, path: str) -> Dict[str, Any]:
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        logger.debug("Loaded configuration from %s", path)
        return data

    @staticmethod
    def _apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            section_data = dict(config_data.get(section) or {})
            section_data[key] = value
            config_data[section] = section_data
            logger.debug("Applied environment override %s", env_name)
        return config_data

    def get_typed(self, config_type: Type[T]) -> T:
        """Get one typed section of the configuration."""
        if config_type is AppConfig:
            return self.app_config
        attr_name = self._TYPE_MAPPING.get(config_type)
        if attr_name is None:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, attr_name)

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
