"""Custom exception classes for the meal recommendation service.

Every exception carries an HTTP status code and a details dictionary so the
handlers in `core.error_handlers` can render them uniformly.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Meal').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when input validation fails outside of pydantic."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)


class NoMealsAvailableError(AppException):
    """Raised when the candidate pool drawn from storage is empty."""

    def __init__(self):
        super().__init__(
            "No meals available",
            status_code=404,
            details={"reason": "no_meals_available"}
        )


class NoSuitableMealError(AppException):
    """Raised when every candidate meal was eliminated or scored at or below zero."""

    def __init__(self, candidates: int):
        """Initialize no suitable meal error.

        Args:
            candidates: Number of candidate meals that were scored.
        """
        super().__init__(
            "No suitable meal found",
            status_code=404,
            details={"reason": "no_suitable_meal", "candidates": candidates}
        )


class WeatherServiceError(AppException):
    """Raised when the upstream weather API cannot be reached or parsed."""

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        details = {"upstream_status": upstream_status} if upstream_status else {}
        super().__init__(message, status_code=502, details=details)


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        """Initialize configuration error.

        Args:
            message: Configuration error message.
            config_key: Optional configuration key that is invalid.
        """
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=500, details=details)
