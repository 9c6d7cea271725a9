# src/patterns_demo/infrastructure/persistence/exceptions.py
class PersistenceError(Exception):
    """Base exception for persistence-related errors."""
    pass

class StorageError(PersistenceError):
    """Raised when there's an error with storage operations."""
    pass
