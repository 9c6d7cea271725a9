"""User actions."""
import argparse
from typing import Any, Dict, List, Mapping

from patterns_demo.application.user.dto import PasswordUpdatedResponse, UpdatePasswordRequest
from patterns_demo.domain.base.exceptions import ValidationError
from patterns_demo.domain.user.ports import PasswordHasherPort, UserStorePort
from patterns_demo.domain.user.user_aggregate import User
from patterns_demo.infrastructure.logging.logger import get_logger


class UpdateUserPassword:
    """Replace a user's password hash.

    ``handle`` holds the whole operation. The remaining methods are hooks the
    controller and command adapters use to turn their input into a
    ``handle`` call.
    """

    command_signature = "user:update-password"
    command_description = "Set a new password for a user"
    request_model = UpdatePasswordRequest

    def __init__(self, users: UserStorePort, hasher: PasswordHasherPort, logger: Any = None):
        self._users = users
        self._hasher = hasher
        self._logger = logger or get_logger(__name__)

    def handle(self, user: User, new_password: str) -> None:
        """
        Hash ``new_password`` and store it on ``user``.

        Raises:
            ValidationError: If the new password is empty
            UserNotFoundError: If the user store does not know ``user``
        """
        if not new_password:
            raise ValidationError("A new password is required", {"password": ["The password field is required."]})
        password_hash = self._hasher.hash(new_password)
        # The caller's user only changes once the store has accepted the new hash
        self._users.save(user.model_copy(update={"password_hash": password_hash}))
        user.change_password_hash(password_hash)
        self._logger.info("Password updated", user=user.name)

    # Request handler hooks

    def validate_request(self, data: Mapping[str, Any]) -> Dict[str, List[str]]:
        """Check the raw request against the stored user.

        Fields the request model rejects as malformed are skipped here.
        """
        errors: Dict[str, List[str]] = {}
        username = data.get("username")
        current_password = data.get("current_password")
        if isinstance(username, str) and username and isinstance(current_password, str):
            user = self._users.get_by_name(username)
            if not self._hasher.verify(user.password_hash, current_password):
                errors["current_password"] = ["The provided password does not match your current password."]
        confirmation = data.get("password_confirmation")
        if confirmation is not None and confirmation != data.get("password"):
            errors["password"] = ["The password confirmation does not match."]
        return errors

    def request_arguments(self, request: UpdatePasswordRequest) -> Dict[str, Any]:
        return {"user": self._users.get_by_name(request.username), "new_password": request.password}

    def to_response(self, result: None, request: UpdatePasswordRequest) -> PasswordUpdatedResponse:
        return PasswordUpdatedResponse(message="Password updated.", username=request.username)

    # Command hooks

    def configure_command(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("username", help="Name of the user")
        parser.add_argument("password", help="New password")

    def command_arguments(self, namespace: argparse.Namespace) -> Dict[str, Any]:
        return {"user": self._users.get_by_name(namespace.username), "new_password": namespace.password}

    def command_status(self, result: None, namespace: argparse.Namespace) -> str:
        return f"Password updated for {namespace.username}."
