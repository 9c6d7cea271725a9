"""Application bootstrap - the composition root.

Every collaborator is built here and handed to its consumers through their
constructors. Nothing in the package looks collaborators up by type.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from patterns_demo.application.delivery.car_delivery import CarDelivery
from patterns_demo.application.delivery.strategies import build_delivery_strategies
from patterns_demo.application.order.service import OrderService
from patterns_demo.application.user.actions import UpdateUserPassword
from patterns_demo.config.manager import ConfigurationManager
from patterns_demo.config.schemas import AppConfig
from patterns_demo.domain.delivery.strategy import DeliveryStrategy
from patterns_demo.domain.order.repository import OrderRepository
from patterns_demo.infrastructure.error.error_middleware import ErrorMiddleware
from patterns_demo.infrastructure.error.exception_handler import ExceptionHandler
from patterns_demo.infrastructure.factories.car_factory import CarFactory
from patterns_demo.infrastructure.factories.view_factory import ViewFactory
from patterns_demo.infrastructure.jobs.job_queue import JobQueue
from patterns_demo.infrastructure.logging.logger import get_logger, setup_logging
from patterns_demo.infrastructure.persistence.base_repository import Clock, utc_now
from patterns_demo.infrastructure.persistence.repository_factory import RepositoryFactory
from patterns_demo.infrastructure.security.password_hasher import WerkzeugPasswordHasher
from patterns_demo.infrastructure.users.user_store import InMemoryUserStore


class Application:
    """Wires the demo collaborators from configuration.

    Collaborators are created on first access and then reused for the
    lifetime of the instance.
    """

    def __init__(self, config_path: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None,
                 clock: Optional[Clock] = None,
                 configure_logging: bool = True) -> None:
        self.config_manager = config_manager or ConfigurationManager(config_path)
        self.clock: Clock = clock or utc_now
        self._configure_logging = configure_logging
        self._initialized = False
        self._components: Dict[str, Any] = {}
        self.logger = get_logger(__name__)

    def initialize(self) -> "Application":
        """Load configuration and set up logging. Safe to call more than once."""
        if not self._initialized:
            config = self.config
            if self._configure_logging:
                setup_logging(config.logging)
            self.logger.debug("Application initialized", storage=config.storage.type.value)
            self._initialized = True
        return self

    @property
    def config(self) -> AppConfig:
        return self.config_manager.get_typed(AppConfig)

    def _get(self, name: str, factory) -> Any:
        if name not in self._components:
            self._components[name] = factory()
        return self._components[name]

    @property
    def order_repository(self) -> OrderRepository:
        return self._get("order_repository", lambda: RepositoryFactory.create_repository(
            self.config.storage, clock=self.clock))

    @property
    def order_service(self) -> OrderService:
        return self._get("order_service", lambda: OrderService(self.order_repository))

    @property
    def car_factory(self) -> CarFactory:
        return self._get("car_factory", CarFactory)

    @property
    def view_factory(self) -> ViewFactory:
        views = self.config.views
        return self._get("view_factory", lambda: ViewFactory.from_directory(
            views.templates_dir, template_suffix=views.template_suffix))

    @property
    def delivery_strategies(self) -> Dict[str, DeliveryStrategy]:
        return self._get("delivery_strategies", lambda: build_delivery_strategies(self.config.delivery))

    @property
    def car_delivery(self) -> CarDelivery:
        return self._get("car_delivery", CarDelivery)

    @property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        security = self.config.security
        return self._get("password_hasher", lambda: WerkzeugPasswordHasher(
            method=security.hash_method, salt_length=security.salt_length))

    @property
    def user_store(self) -> InMemoryUserStore:
        return self._get("user_store", InMemoryUserStore)

    @property
    def update_user_password(self) -> UpdateUserPassword:
        return self._get("update_user_password", lambda: UpdateUserPassword(
            self.user_store, self.password_hasher))

    @property
    def job_queue(self) -> JobQueue:
        return self._get("job_queue", JobQueue)

    @property
    def exception_handler(self) -> ExceptionHandler:
        return self._get("exception_handler", ExceptionHandler)

    @property
    def error_middleware(self) -> ErrorMiddleware:
        return self._get("error_middleware", lambda: ErrorMiddleware(self.exception_handler))
