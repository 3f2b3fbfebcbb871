"""Error catalog endpoints.

Clients use these to map ``error_code``/``error_type`` values they receive
in failure envelopes to a description.
"""
from flask import current_app, request
from adminui_api.api.v1 import api_v1_bp
from adminui_api.exceptions import ERROR_CATALOG, NotFoundError
from adminui_api.resources import JsonResource, ResourceCollection
from adminui_api.schemas.error_schema import ErrorTypeSchema, PaginationQuerySchema
from adminui_api.utils.pagination import Page
from adminui_api.utils.response import (
    respond_with_resource,
    respond_with_resource_collection,
)


@api_v1_bp.route("/errors", methods=["GET"])
def list_error_types():
    """
    List the error types the API can return.

    Query parameters:
        page: Page number (default 1)
        per_page: Items per page (default DEFAULT_PAGE_SIZE)

    Returns:
        200: Paginated error types
        422: Invalid query parameters
    """
    params = PaginationQuerySchema().load(request.args)

    page = Page.paginate(
        ERROR_CATALOG,
        page=params["page"],
        per_page=params.get("per_page", current_app.config["DEFAULT_PAGE_SIZE"]),
        path=request.base_url,
        max_per_page=current_app.config["MAX_PAGE_SIZE"],
    )

    return respond_with_resource_collection(
        ResourceCollection(page, ErrorTypeSchema),
        message="Error types retrieved successfully",
    )


@api_v1_bp.route("/errors/<string:error_type>", methods=["GET"])
def get_error_type(error_type):
    """
    Get a single error type.

    Returns:
        200: Error type
        404: Unknown error type
    """
    for exception_class in ERROR_CATALOG:
        if exception_class.error_type == error_type.upper():
            return respond_with_resource(
                JsonResource(exception_class, ErrorTypeSchema),
                message="Error type retrieved successfully",
            )

    raise NotFoundError(f"Error type {error_type} not found")
