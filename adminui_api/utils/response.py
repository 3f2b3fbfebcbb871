"""API response envelope utilities.

Every endpoint answers with the same envelope::

    {
        "status": "success" | "failed",
        "message": <str or null>,
        "data": <payload or null>,
        "links": <payload or null>,
        "meta": {"company": {...}, "api": {...}, ...},
        "errors": <field errors, only when supplied>,
        "exception": <message/file/line/code, only when supplied>,
        "error_code": <int, failures only>
    }
"""
import logging
import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from flask import current_app, jsonify

from adminui_api.utils.constants import EnvelopeStatus

logger = logging.getLogger(__name__)

STATUS_SUCCESS = EnvelopeStatus.SUCCESS.value
STATUS_FAILED = EnvelopeStatus.FAILED.value
DEFAULT_ERROR_CODE = 1
EXTENSION_KEY = "api_responder"


@dataclass(frozen=True)
class ResponseSettings:
    """Read-only values injected into the meta block of every envelope."""

    company_website: str = "AdminUI Api"
    company_email: str = "api@adminui.co.uk"
    api_version: str = "1.0.1"
    api_author: str = "https://www.adminui.co.uk"
    api_email: str = "support@adminui.co.uk"

    @classmethod
    def from_config(cls, config: Mapping) -> "ResponseSettings":
        """Build settings from a Flask config (or any mapping)."""
        defaults = cls()
        return cls(
            company_website=config.get("APP_URL", defaults.company_website),
            company_email=config.get("MAIL_FROM_ADDRESS", defaults.company_email),
            api_version=config.get("API_VERSION", defaults.api_version),
            api_author=config.get("API_AUTHOR", defaults.api_author),
            api_email=config.get("API_SUPPORT_EMAIL", defaults.api_email),
        )


@dataclass
class Result:
    """Serialized payload of an outcome: data, links and meta."""

    data: Any = None
    links: Any = None
    meta: Optional[Mapping] = None

    @classmethod
    def coerce(cls, value) -> "Result":
        """Accept a Result, a resource, a ``{data, links, meta}`` mapping or None."""
        if value is None:
            return cls()
        if isinstance(value, Result):
            return value
        if hasattr(value, "to_result"):
            return value.to_result()
        if isinstance(value, Mapping):
            return cls(
                data=value.get("data"),
                links=value.get("links"),
                meta=value.get("meta"),
            )
        raise TypeError(f"Unsupported result type: {type(value).__name__}")


@dataclass
class Outcome:
    """Common fields of a response outcome."""

    message: Optional[str] = None
    result: Any = None
    status: Optional[int] = None
    errors: Any = None
    exception: Optional[BaseException] = None

    success = None

    @staticmethod
    def from_mapping(data: Mapping) -> "Outcome":
        """
        Convert a loosely-structured outcome mapping into an outcome variant.

        ``success`` of ``True`` or ``"success"`` is a success. Anything else,
        including a missing key, is a failure.
        """
        common = {
            "message": data.get("message"),
            "result": data.get("result"),
            "status": data.get("status"),
            "errors": data.get("errors"),
            "exception": data.get("exception"),
        }
        success = data.get("success")
        if success is True or success == STATUS_SUCCESS:
            return SuccessOutcome(**common)

        error_code = data.get("error_code")
        return FailureOutcome(
            error_code=DEFAULT_ERROR_CODE if error_code is None else error_code,
            **common,
        )


@dataclass
class SuccessOutcome(Outcome):
    """A successful outcome."""

    success = True


@dataclass
class FailureOutcome(Outcome):
    """A failed outcome."""

    error_code: int = DEFAULT_ERROR_CODE

    success = False


def coerce_outcome(outcome) -> Outcome:
    """Return ``outcome`` as an outcome variant."""
    if isinstance(outcome, Outcome):
        return outcome
    if outcome is None:
        return FailureOutcome()
    if isinstance(outcome, Mapping):
        return Outcome.from_mapping(outcome)
    raise TypeError(f"Unsupported outcome type: {type(outcome).__name__}")


def describe_exception(exception: BaseException) -> dict:
    """Reduce an exception to message, file, line and code. No traceback."""
    file_name = None
    line = None
    if exception.__traceback__ is not None:
        frame = traceback.extract_tb(exception.__traceback__)[-1]
        file_name = frame.filename
        line = frame.lineno

    code = getattr(exception, "code", 0)
    if not isinstance(code, int) or isinstance(code, bool):
        code = 0

    return {
        "message": str(exception),
        "file": file_name,
        "line": line,
        "code": code,
    }


class ResponseFormatter:
    """Shape outcomes into response envelopes."""

    def __init__(self, settings: Optional[ResponseSettings] = None):
        self.settings = settings or ResponseSettings()

    def build_meta(self, meta: Optional[Mapping] = None) -> dict:
        """Copy ``meta`` and add the company and api blocks."""
        meta = dict(meta or {})
        meta["company"] = {
            "website": self.settings.company_website,
            "email": self.settings.company_email,
        }
        meta["api"] = {
            "version": self.settings.api_version,
            "author": self.settings.api_author,
            "email": self.settings.api_email,
        }
        return meta

    def format(self, outcome, default_status: int = 200):
        """
        Build the envelope for an outcome.

        Args:
            outcome: Outcome variant or outcome mapping
            default_status: HTTP status used when the outcome sets none

        Returns:
            Tuple of (envelope, status_code)
        """
        outcome = coerce_outcome(outcome)
        result = Result.coerce(outcome.result)

        envelope = {
            "status": STATUS_SUCCESS if outcome.success else STATUS_FAILED,
            "message": outcome.message,
            "data": result.data,
            "links": result.links,
            "meta": self.build_meta(result.meta),
        }

        if outcome.errors is not None:
            envelope["errors"] = outcome.errors

        status_code = outcome.status if outcome.status is not None else default_status

        exception = outcome.exception
        if isinstance(exception, BaseException):
            envelope["exception"] = describe_exception(exception)
            if status_code == 200:
                logger.debug(
                    f"Escalating status to 500 for {type(exception).__name__}"
                )
                status_code = 500

        if outcome.success is False:
            error_code = outcome.error_code
            envelope["error_code"] = DEFAULT_ERROR_CODE if error_code is None else error_code

        return envelope, status_code


class ApiResponder:
    """Flask extension binding a ResponseFormatter to an application."""

    def __init__(self, app=None):
        """Initialize extension."""
        self.app = app
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Build the formatter from the app config."""
        settings = ResponseSettings.from_config(app.config)
        app.extensions[EXTENSION_KEY] = ResponseFormatter(settings)


def get_formatter() -> ResponseFormatter:
    """Return the formatter of the current application."""
    formatter = current_app.extensions.get(EXTENSION_KEY)
    if formatter is None:
        formatter = ResponseFormatter(ResponseSettings.from_config(current_app.config))
    return formatter


def format_response(outcome=None, default_status=200, headers=None):
    """
    Create a standardized API response.

    Args:
        outcome: Outcome variant or outcome mapping
        default_status: HTTP status used when the outcome sets none
        headers: Extra response headers

    Returns:
        Tuple of (response, status_code)
    """
    envelope, status_code = get_formatter().format(outcome, default_status)
    response = jsonify(envelope)
    if headers:
        response.headers.update(headers)
    return response, status_code


def respond_with_resource(resource, message=None, status=200, headers=None):
    """Respond with a single serialized resource."""
    return format_response(
        SuccessOutcome(message=message, result=resource), status, headers
    )


def respond_with_resource_collection(collection, message=None, status=200, headers=None):
    """Respond with a serialized resource collection."""
    return format_response(
        SuccessOutcome(message=message, result=collection), status, headers
    )


def respond_error(message, status=400, exception=None, error_code=DEFAULT_ERROR_CODE, errors=None):
    """Respond with a failure envelope."""
    return format_response(
        FailureOutcome(
            message=message,
            exception=exception,
            error_code=error_code,
            errors=errors,
        ),
        status,
    )


def respond_success(message=""):
    return format_response(SuccessOutcome(message=message))


def respond_created(data):
    """Respond with HTTP 201. Resources are wrapped in a success outcome."""
    if hasattr(data, "to_result"):
        data = SuccessOutcome(result=data)
    return format_response(data, 201)


def respond_no_content(message="No Content Found"):
    return format_response(SuccessOutcome(message=message), 200)


def respond_unauthorized(message="Unauthorized"):
    return respond_error(message, 401)


def respond_forbidden(message="Forbidden"):
    return respond_error(message, 403)


def respond_not_found(message="Not Found"):
    return respond_error(message, 404)


def respond_internal_error(message="Internal Error"):
    return respond_error(message, 500)


def respond_validation_error(errors, message="Validation failed"):
    """Respond with HTTP 422 and field-level errors."""
    return respond_error(message, 422, errors=errors)
