# src/patterns_demo/infrastructure/persistence/repository_factory.py
import os
from typing import Any, Optional

from patterns_demo.config.schemas.storage_schema import RepositoryType, StorageConfig
from patterns_demo.domain.base.exceptions import ConfigurationError
from patterns_demo.domain.order.repository import OrderRepository
from patterns_demo.infrastructure.persistence.base_repository import Clock
from patterns_demo.infrastructure.persistence.in_memory_repository import InMemoryOrderRepository
from patterns_demo.infrastructure.persistence.json_repository import JSONOrderRepository


class RepositoryFactory:
    """
    Factory for creating order repository instances based on configuration.

    Callers receive an ``OrderRepository`` and never learn which storage
    backend sits behind it.
    """

    @staticmethod
    def create_repository(
        config: StorageConfig,
        clock: Optional[Clock] = None,
        logger: Any = None
    ) -> OrderRepository:
        """
        Create a repository instance based on configuration.

        Args:
            config: Storage configuration section
            clock: Optional clock used for order timestamps
            logger: Optional injected logger

        Returns:
            OrderRepository: Configured repository instance

        Raises:
            ConfigurationError: If the repository type is unsupported
        """
        if config.type == RepositoryType.MEMORY:
            return InMemoryOrderRepository(clock=clock, logger=logger)
        elif config.type == RepositoryType.JSON:
            if not config.json_path:
                raise ConfigurationError("JSON repository requires a storage path", ["storage.json_path"])
            return JSONOrderRepository(
                storage_path=os.path.expandvars(config.json_path),
                clock=clock,
                logger=logger
            )
        else:
            raise ConfigurationError(f"Unsupported repository type: {config.type}")
