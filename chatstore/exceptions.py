"""Custom exception hierarchy for chatstore."""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    """Standardized error codes surfaced to the HTTP layer."""

    # Pagination errors
    ANCHOR_NOT_FOUND = "ANCHOR_NOT_FOUND"

    # Create/update errors
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ChatStoreException(Exception):
    """
    Base exception for all chatstore errors.

    Provides structured error responses with:
    - Human-readable message
    - Machine-readable error code
    - HTTP status code
    - Optional additional details
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            status_code: HTTP status code the caller should return
            details: Optional additional context/details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for JSON response.

        Returns:
            Dictionary with error, message, and details fields
        """
        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": self.details
        }


class AnchorNotFoundError(ChatStoreException):
    """Pagination anchor chat does not exist."""

    def __init__(self, anchor_id: str):
        super().__init__(
            f"Chat with id {anchor_id} not found",
            ErrorCode.ANCHOR_NOT_FOUND,
            status_code=404,
            details={"anchor_id": anchor_id}
        )


class MissingRequiredFieldError(ChatStoreException):
    """A create call omitted a field the entity cannot default."""

    def __init__(self, entity: str, field: str):
        super().__init__(
            f"Missing required field '{field}' for {entity}",
            ErrorCode.MISSING_REQUIRED_FIELD,
            status_code=400,
            details={"entity": entity, "field": field}
        )


class ValidationError(ChatStoreException):
    """Validation failed for caller input."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message,
            ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details=details
        )
