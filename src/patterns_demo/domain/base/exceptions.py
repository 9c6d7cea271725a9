"""Base domain exceptions - foundation for all domain-specific errors."""
from typing import Any, Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(
            f"{entity_type} with ID {entity_id} not found",
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when domain validation fails.

    ``errors`` maps each offending field to the list of messages for it.
    """

    def __init__(self, message: str, errors: Optional[Dict[str, List[str]]] = None):
        errors = errors or {}
        super().__init__(message, "VALIDATION_ERROR", {"errors": errors})
        self.errors = errors

    @property
    def fields(self) -> List[str]:
        """Names of the fields that failed validation."""
        return list(self.errors.keys())


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", {"missing_fields": missing_fields or []})
        self.missing_fields = missing_fields or []


def field_errors(error: Any) -> Dict[str, List[str]]:
    """Collect pydantic validation errors into a field -> messages map."""
    errors: Dict[str, List[str]] = {}
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "__root__"
        errors.setdefault(field, []).append(item["msg"])
    return errors
