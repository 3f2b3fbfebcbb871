"""Application constants and enums."""
from enum import Enum


class EnvelopeStatus(str, Enum):
    """Values of the envelope ``status`` field."""

    SUCCESS = "success"
    FAILED = "failed"


# Error type constants
class ErrorType:
    """Error type constants for API exceptions."""

    BAD_REQUEST = "BAD_REQUEST"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    AUTHORIZATION_ERROR = "AUTHORIZATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
