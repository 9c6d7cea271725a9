"""Tests for configuration loading."""
import json
import os
from decimal import Decimal
from unittest.mock import patch

import pytest

from patterns_demo.config import (
    AppConfig,
    ConfigurationManager,
    DeliveryConfig,
    LoggingConfig,
    RepositoryType,
    StorageConfig,
)
from patterns_demo.domain.base.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in list(os.environ):
        if name.startswith("PATTERNS_DEMO_"):
            monkeypatch.delenv(name)


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestConfigurationManager:

    def test_defaults_without_file(self):
        config = ConfigurationManager().app_config

        assert config.storage.type == RepositoryType.MEMORY
        assert config.logging.level == "WARNING"
        assert set(config.delivery.rates) == {"ship", "air"}

    def test_load_from_file(self, tmp_path):
        path = write_config(tmp_path, {
            "logging": {"level": "debug"},
            "delivery": {"rates": {"ship": {"base_cost": "10", "cost_per_km": "1", "speed_km_per_day": 100}}},
        })

        manager = ConfigurationManager(path)

        assert manager.get_typed(LoggingConfig).level == "DEBUG"
        assert manager.get_typed(DeliveryConfig).rates["ship"].base_cost == Decimal("10")

    def test_environment_references_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DATA_HOME", "/srv/data")
        path = write_config(tmp_path, {"storage": {"type": "json", "json_path": "${DATA_HOME}/orders.json"}})

        storage = ConfigurationManager(path).get_typed(StorageConfig)

        assert storage.json_path == "/srv/data/orders.json"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PATTERNS_DEMO_STORAGE_TYPE", "json")
        monkeypatch.setenv("PATTERNS_DEMO_STORAGE_PATH", "/tmp/o.json")

        storage = ConfigurationManager().get_typed(StorageConfig)

        assert storage.type == RepositoryType.JSON
        assert storage.json_path == "/tmp/o.json"

    def test_explicit_overrides_win(self, monkeypatch):
        monkeypatch.setenv("PATTERNS_DEMO_LOG_LEVEL", "ERROR")

        manager = ConfigurationManager(overrides={"logging": {"level": "DEBUG"}})

        assert manager.get_typed(LoggingConfig).level == "DEBUG"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(tmp_path / "absent.json")).app_config

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{broken")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(str(path)).app_config

    def test_invalid_values(self, tmp_path):
        path = write_config(tmp_path, {"logging": {"destination": "printer"}})

        with pytest.raises(ConfigurationError):
            ConfigurationManager(path).app_config

    def test_default_strategy_must_have_rates(self, tmp_path):
        path = write_config(tmp_path, {"delivery": {"default_strategy": "air", "rates": {
            "ship": {"base_cost": "1", "cost_per_km": "1", "speed_km_per_day": 1}}}})

        with pytest.raises(ConfigurationError):
            ConfigurationManager(path).app_config

    def test_get_typed_app_config(self):
        manager = ConfigurationManager()

        assert isinstance(manager.get_typed(AppConfig), AppConfig)

    def test_get_typed_unknown(self):
        with pytest.raises(ValueError):
            ConfigurationManager().get_typed(dict)

    def test_reload(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "INFO"}}))
        manager = ConfigurationManager(str(path))
        assert manager.get_typed(LoggingConfig).level == "INFO"

        path.write_text(json.dumps({"logging": {"level": "ERROR"}}))
        manager.reload()

        assert manager.get_typed(LoggingConfig).level == "ERROR"

    def test_loaded_once(self):
        manager = ConfigurationManager()
        with patch.object(manager, "_load_app_config", wraps=manager._load_app_config) as load:
            manager.app_config
            manager.app_config
        assert load.call_count == 1
