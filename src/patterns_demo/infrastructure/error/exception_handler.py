"""Maps exceptions to error responses."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from patterns_demo.domain.base.exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from patterns_demo.infrastructure.logging.logger import get_logger
from patterns_demo.infrastructure.persistence.exceptions import PersistenceError


class ErrorResponse(BaseModel):
    """Error payload reported to the user."""
    kind: str
    error_code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "kind": self.kind,
            "message": self.message,
            "details": self.details,
        }


class ExceptionHandler:
    """Translates exceptions into ``ErrorResponse`` objects.

    Known domain errors keep their message. Anything else is logged with a
    traceback and reported as an internal error.
    """

    # Most specific first
    _KINDS = (
        (EntityNotFoundError, "NotFound", "NOT_FOUND"),
        (ValidationError, "ValidationError", "VALIDATION_ERROR"),
        (ConfigurationError, "ConfigurationError", "CONFIGURATION_ERROR"),
        (PersistenceError, "StorageError", "STORAGE_ERROR"),
    )

    def __init__(self, logger: Any = None):
        self._logger = logger or get_logger(__name__)

    def handle_error(self, error: Exception) -> ErrorResponse:
        for error_type, kind, code in self._KINDS:
            if isinstance(error, error_type):
                details = error.details if isinstance(error, DomainException) else {}
                self._logger.warning("Handled error", kind=kind, message=str(error))
                return ErrorResponse(kind=kind, error_code=code, message=str(error), details=details)

        if isinstance(error, DomainException):
            self._logger.warning("Handled error", kind="DomainError", message=str(error))
            return ErrorResponse(kind="DomainError", error_code=error.error_code,
                                 message=str(error), details=error.details)

        self._logger.exception("Unexpected error", error_type=type(error).__name__)
        return ErrorResponse(kind="InternalError", error_code="INTERNAL_ERROR",
                             message=f"{type(error).__name__}: {error}")


_exception_handler: Optional[ExceptionHandler] = None


def get_exception_handler() -> ExceptionHandler:
    """Get the shared exception handler."""
    global _exception_handler
    if _exception_handler is None:
        _exception_handler = ExceptionHandler()
    return _exception_handler
