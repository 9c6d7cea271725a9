"""Environment variable expansion for configuration values."""
import os
from typing import Any


def expand_env_vars(value: Any) -> Any:
    """
    Expand ``$VAR`` and ``${VAR}`` references in strings, recursively.

    Unknown variables are left untouched.
    """
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: dict) -> dict:
    """Expand environment references throughout a configuration mapping."""
    return expand_env_vars(config)
