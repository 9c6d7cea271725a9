"""User application layer - the password update action."""
from .actions import UpdateUserPassword
from .dto import PasswordUpdatedResponse, UpdatePasswordRequest

__all__ = ['UpdateUserPassword', 'UpdatePasswordRequest', 'PasswordUpdatedResponse']
