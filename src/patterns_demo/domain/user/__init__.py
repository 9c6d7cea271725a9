"""User domain - entity, ports and exceptions."""
from .exceptions import UserNotFoundError
from .ports import PasswordHasherPort, UserStorePort
from .user_aggregate import User

__all__ = ['User', 'UserNotFoundError', 'PasswordHasherPort', 'UserStorePort']
