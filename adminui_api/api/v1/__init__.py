"""API v1 blueprint."""
from flask import Blueprint

api_v1_bp = Blueprint("api_v1", __name__)

# Import endpoints so their routes register on the blueprint
from adminui_api.api.v1 import errors  # noqa: E402,F401
