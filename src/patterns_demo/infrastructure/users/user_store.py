"""In-memory user store."""
from typing import Any, Dict, List

from patterns_demo.domain.base.exceptions import ValidationError
from patterns_demo.domain.user.exceptions import UserNotFoundError
from patterns_demo.domain.user.ports import UserStorePort
from patterns_demo.domain.user.user_aggregate import User
from patterns_demo.infrastructure.logging.logger import get_logger


class InMemoryUserStore(UserStorePort):
    """Users keyed by name, kept for the lifetime of the process."""

    def __init__(self, logger: Any = None):
        self._users: Dict[str, User] = {}
        self._logger = logger or get_logger(__name__)

    def get_by_name(self, name: str) -> User:
        user = self._users.get(name)
        if user is None:
            raise UserNotFoundError(name)
        return user.model_copy(deep=True)

    def add(self, user: User) -> User:
        if user.name in self._users:
            raise ValidationError(f"User {user.name} already exists",
                                  {"name": ["Name is already taken"]})
        self._users[user.name] = user.model_copy(deep=True)
        self._logger.debug("User added", user=user.name)
        return user

    def save(self, user: User) -> None:
        if user.name not in self._users:
            raise UserNotFoundError(user.name)
        self._users[user.name] = user.model_copy(deep=True)
        self._logger.debug("User saved", user=user.name)

    def names(self) -> List[str]:
        return sorted(self._users)
