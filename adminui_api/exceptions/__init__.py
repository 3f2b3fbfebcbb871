"""Exceptions package."""
from adminui_api.exceptions.base import BaseAPIException
from adminui_api.exceptions.http_exceptions import (
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    ValidationError,
    InternalError,
)

__all__ = [
    "BaseAPIException",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "InternalError",
    "ERROR_CATALOG",
]

# Error types a client can receive, in catalog order
ERROR_CATALOG = [
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    ValidationError,
    InternalError,
]
