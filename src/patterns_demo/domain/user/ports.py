"""Ports the password action depends on."""
from abc import ABC, abstractmethod

from .user_aggregate import User


class PasswordHasherPort(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of ``password``."""

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        """Check ``password`` against a hash produced by ``hash``."""


class UserStorePort(ABC):
    """Port for user persistence."""

    @abstractmethod
    def get_by_name(self, name: str) -> User:
        """
        Load a user.

        Raises:
            UserNotFoundError: If no user has this name
        """

    @abstractmethod
    def save(self, user: User) -> None:
        """
        Persist changes to an existing user.

        Raises:
            UserNotFoundError: If the user is not known to the store
        """

    @abstractmethod
    def add(self, user: User) -> User:
        """Register a new user."""
