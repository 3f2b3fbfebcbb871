"""Schemas package."""
from adminui_api.schemas.error_schema import ErrorTypeSchema, PaginationQuerySchema

__all__ = [
    "ErrorTypeSchema",
    "PaginationQuerySchema",
]
