"""Application factory."""
import logging

from flask import Flask
from marshmallow import ValidationError as SchemaValidationError
from werkzeug.exceptions import HTTPException

from config import get_config
from adminui_api.extensions import ma, responder
from adminui_api.exceptions.base import BaseAPIException
from adminui_api.utils.response import (
    respond_error,
    respond_forbidden,
    respond_internal_error,
    respond_not_found,
    respond_unauthorized,
    respond_validation_error,
)


def create_app(config_name=None):
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, testing, production)

    Returns:
        Flask application instance
    """
    flask_app = Flask(__name__)

    # Load configuration
    config = get_config(config_name)
    flask_app.config.from_object(config)

    # Keep envelope keys in the order they are built
    flask_app.json.sort_keys = False

    # Initialize extensions
    initialize_extensions(flask_app)

    # Register blueprints
    register_blueprints(flask_app)

    # Register error handlers
    register_error_handlers(flask_app)

    # Setup logging
    setup_logging(flask_app)

    return flask_app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    # Marshmallow
    ma.init_app(app)

    # Response envelope formatter, built once from config
    responder.init_app(app)


def register_blueprints(app):
    """Register application blueprints."""
    from adminui_api.api import register_api_blueprints

    register_api_blueprints(app)


def register_error_handlers(app):
    """Register error handlers."""

    def exposed(error):
        """Only hand the exception to the formatter when configured to."""
        return error if app.config.get("EXPOSE_EXCEPTIONS") else None

    @app.errorhandler(BaseAPIException)
    def handle_api_exception(error):
        """Handle custom API exceptions."""
        app.logger.warning(f"API error: {error.to_dict()}")
        return respond_error(
            error.message,
            error.status_code,
            exception=exposed(error),
            error_code=error.error_code,
            errors=error.error_details or None,
        )

    @app.errorhandler(SchemaValidationError)
    def handle_schema_validation_error(error):
        """Handle marshmallow validation errors."""
        return respond_validation_error(error.messages)

    @app.errorhandler(401)
    def handle_unauthorized(error):
        """Handle 401 errors."""
        return respond_unauthorized()

    @app.errorhandler(403)
    def handle_forbidden(error):
        """Handle 403 errors."""
        return respond_forbidden()

    @app.errorhandler(404)
    def handle_not_found(error):
        """Handle 404 errors."""
        return respond_not_found()

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        """Handle 405 errors."""
        return respond_error("Method Not Allowed", 405)

    @app.errorhandler(500)
    def handle_internal_error(error):
        """Handle 500 errors."""
        app.logger.error(f"Internal server error: {error}")
        return respond_internal_error()

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        """Handle any other HTTP error raised by Flask or werkzeug."""
        return respond_error(error.description or error.name, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        """Handle unexpected errors."""
        app.logger.error(f"Unexpected error: {error}", exc_info=True)
        return respond_error("Internal Error", 500, exception=exposed(error))


def setup_logging(app):
    """Setup application logging."""
    log_level = getattr(logging, app.config.get("LOG_LEVEL", "INFO"))

    # Create formatter
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Repeated create_app calls must not stack handlers
    if app.config.get("LOG_TO_STDOUT") and not root_logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(log_level)
        root_logger.addHandler(stream_handler)

    # Package loggers propagate to the root logger
    package_logger = logging.getLogger("adminui_api")
    package_logger.propagate = True
    package_logger.setLevel(log_level)

    # Configure Flask app logger
    app.logger.setLevel(log_level)

    app.logger.info("Application startup")
