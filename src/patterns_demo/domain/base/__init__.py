"""Domain base package - shared entity base class and exception hierarchy."""
from .entity import Entity
from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    'Entity',
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'ConfigurationError',
]
