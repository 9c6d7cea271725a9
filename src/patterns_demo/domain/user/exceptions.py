"""User domain exceptions."""
from patterns_demo.domain.base.exceptions import EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user is not known to the user store."""

    def __init__(self, username: str):
        super().__init__("User", username)
