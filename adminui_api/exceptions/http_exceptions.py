"""HTTP outcome exceptions raised by views."""
from adminui_api.exceptions.base import BaseAPIException
from adminui_api.utils.constants import ErrorType


class BadRequestError(BaseAPIException):
    """Raised when the request is malformed or invalid."""

    status_code = 400
    error_type = ErrorType.BAD_REQUEST
    message = "Bad request"


class UnauthorizedError(BaseAPIException):
    """Raised when authentication is required but not provided."""

    status_code = 401
    error_type = ErrorType.AUTHENTICATION_ERROR
    message = "Unauthorized"


class ForbiddenError(BaseAPIException):
    """Raised when the caller lacks permissions for the requested action."""

    status_code = 403
    error_type = ErrorType.AUTHORIZATION_ERROR
    message = "Forbidden"


class NotFoundError(BaseAPIException):
    """Raised when a requested resource is not found."""

    status_code = 404
    error_type = ErrorType.NOT_FOUND
    message = "Not Found"


class ConflictError(BaseAPIException):
    """Raised when a resource conflict occurs."""

    status_code = 409
    error_type = ErrorType.CONFLICT
    message = "Resource conflict"


class ValidationError(BaseAPIException):
    """Raised when request data validation fails."""

    status_code = 422
    error_type = ErrorType.VALIDATION_ERROR
    message = "Validation failed"


class InternalError(BaseAPIException):
    """Raised for failures the client cannot fix."""

    message = "Internal Error"
