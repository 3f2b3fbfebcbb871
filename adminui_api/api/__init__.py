"""API package."""
from flask import Blueprint
from adminui_api.utils.response import respond_success

# Create main API blueprint
api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint."""
    return respond_success("Service is running")


def register_api_blueprints(app):
    """Register all API blueprints."""
    from adminui_api.api.v1 import api_v1_bp

    # Register versioned API blueprints
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(api_v1_bp, url_prefix="/api/v1")
