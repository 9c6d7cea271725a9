"""User request and response DTOs."""
from typing import Optional

from pydantic import Field

from patterns_demo.application.dto.base import BaseRequest, BaseResponse


class UpdatePasswordRequest(BaseRequest):
    """Inbound password change request."""
    username: str = Field(min_length=1)
    current_password: str
    password: str = Field(min_length=8)
    password_confirmation: Optional[str] = None


class PasswordUpdatedResponse(BaseResponse):
    """Response sent after a password change."""
    username: str
