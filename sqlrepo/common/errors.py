"""
Error Definitions

Defines custom exception classes raised by the repository layer.
Errors coming from the database driver are never wrapped in these classes;
they propagate as SQLAlchemy exceptions.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary format

        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "type": self.error_type,
                "code": self.code,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result


class NotFoundError(AppError):
    """
    Entity Not Found Error

    Raised when a lookup or existence check matched no rows.
    """

    def __init__(
        self,
        message: str = "Entity not found",
        code: str = "not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="not_found_error",
            code=code,
            details=details,
        )


class ValidationError(AppError):
    """
    Entity Validation Error

    Raised when an entity class is declared incorrectly or an instance
    handed to the repository is not of the expected entity type.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        code: str = "validation_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="validation_error",
            code=code,
            details=details,
        )


class RepositoryError(AppError):
    """
    Repository Error

    Raised when the repository cannot complete an operation for reasons
    not reported by the driver (e.g. the dialect offers no way to read
    back generated identifiers).
    """

    def __init__(
        self,
        message: str = "Repository error",
        code: str = "repository_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="repository_error",
            code=code,
            details=details,
        )
