from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest
from jinja2 import DictLoader, Environment, StrictUndefined

from patterns_demo.bootstrap import Application
from patterns_demo.config.manager import ConfigurationManager
from patterns_demo.domain.user.user_aggregate import User
from patterns_demo.infrastructure.factories.view_factory import ViewFactory
from patterns_demo.infrastructure.persistence.in_memory_repository import InMemoryOrderRepository
from patterns_demo.infrastructure.persistence.json_repository import JSONOrderRepository
from patterns_demo.infrastructure.security.password_hasher import WerkzeugPasswordHasher
from patterns_demo.infrastructure.users.user_store import InMemoryUserStore

# Few iterations keep hashing fast in tests
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


class FakeClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = self.current + timedelta(seconds=1)
        return now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def logger():
    """Mock logger."""
    return Mock()


@pytest.fixture
def memory_repository(clock, logger):
    return InMemoryOrderRepository(clock=clock, logger=logger)


@pytest.fixture
def json_repository(tmp_path, clock, logger):
    return JSONOrderRepository(str(tmp_path / "orders.json"), clock=clock, logger=logger)


@pytest.fixture(params=["memory", "json"])
def order_repository(request):
    """Every repository implementation, for contract tests."""
    return request.getfixturevalue(f"{request.param}_repository")


@pytest.fixture
def hasher():
    return WerkzeugPasswordHasher(method=FAST_HASH_METHOD)


@pytest.fixture
def user_store(logger):
    return InMemoryUserStore(logger=logger)


@pytest.fixture
def alice(user_store, hasher):
    return user_store.add(User(name="alice", password_hash=hasher.hash("old-password")))


@pytest.fixture
def view_factory(logger):
    environment = Environment(
        loader=DictLoader({
            "greeting.txt.j2": "Hello {{ name }}!",
            "orders/line.txt.j2": "#{{ order.id }} {{ order.client }}",
        }),
        undefined=StrictUndefined,
    )
    return ViewFactory(environment, logger=logger)


@pytest.fixture
def app(clock, monkeypatch):
    """Application wired with defaults, in-memory storage and fast hashing."""
    for name in ("PATTERNS_DEMO_STORAGE_TYPE", "PATTERNS_DEMO_STORAGE_PATH", "PATTERNS_DEMO_LOG_LEVEL",
                 "PATTERNS_DEMO_LOG_DESTINATION", "PATTERNS_DEMO_TEMPLATES_DIR"):
        monkeypatch.delenv(name, raising=False)
    manager = ConfigurationManager(overrides={"security": {"hash_method": FAST_HASH_METHOD}})
    return Application(config_manager=manager, clock=clock, configure_logging=False).initialize()
