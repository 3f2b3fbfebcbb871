"""Base exception classes."""
from adminui_api.utils.constants import ErrorType


class BaseAPIException(Exception):
    """Base exception for all API errors."""

    status_code = 500
    error_type = ErrorType.INTERNAL_ERROR
    message = "An unexpected error occurred"
    error_code = 1

    def __init__(self, message=None, error_details=None, error_code=None):
        """
        Initialize exception.

        Args:
            message: Custom error message
            error_details: Field-level error details dictionary
            error_code: Application error code reported to the client
        """
        super().__init__(message or self.message)
        if message:
            self.message = message
        if error_code is not None:
            self.error_code = error_code
        self.error_details = error_details or {}

    @property
    def code(self):
        """Code reported in the sanitized exception block."""
        return self.error_code

    def to_dict(self):
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "details": self.error_details,
            "status_code": self.status_code,
            "error_code": self.error_code,
        }
