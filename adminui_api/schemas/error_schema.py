"""Error catalog schemas."""
from marshmallow import Schema, fields, validate, EXCLUDE


class ErrorTypeSchema(Schema):
    """Schema for an API error type."""

    error_type = fields.Str(dump_only=True)
    status_code = fields.Int(dump_only=True)
    message = fields.Str(dump_only=True)
    error_code = fields.Int(dump_only=True)


class PaginationQuerySchema(Schema):
    """Schema for page/per_page query parameters."""

    class Meta:
        unknown = EXCLUDE

    page = fields.Int(load_default=1, validate=validate.Range(min=1))
    per_page = fields.Int(validate=validate.Range(min=1, max=100))
