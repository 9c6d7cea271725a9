"""Order persistence - swappable repository implementations."""
from .exceptions import PersistenceError, StorageError
from .in_memory_repository import InMemoryOrderRepository
from .json_repository import JSONOrderRepository
from .repository_factory import RepositoryFactory

__all__ = [
    'InMemoryOrderRepository',
    'JSONOrderRepository',
    'RepositoryFactory',
    'PersistenceError',
    'StorageError',
]
