"""Utilities package."""
from adminui_api.utils.response import (
    ResponseFormatter,
    ResponseSettings,
    Result,
    Outcome,
    SuccessOutcome,
    FailureOutcome,
    format_response,
    respond_with_resource,
    respond_with_resource_collection,
    respond_error,
    respond_success,
    respond_created,
    respond_no_content,
    respond_unauthorized,
    respond_forbidden,
    respond_not_found,
    respond_internal_error,
    respond_validation_error,
)
from adminui_api.utils.pagination import Page

__all__ = [
    "ResponseFormatter",
    "ResponseSettings",
    "Result",
    "Outcome",
    "SuccessOutcome",
    "FailureOutcome",
    "format_response",
    "respond_with_resource",
    "respond_with_resource_collection",
    "respond_error",
    "respond_success",
    "respond_created",
    "respond_no_content",
    "respond_unauthorized",
    "respond_forbidden",
    "respond_not_found",
    "respond_internal_error",
    "respond_validation_error",
    "Page",
]
