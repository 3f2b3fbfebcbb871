"""Production environment configuration."""
import os
from config.base import BaseConfig


class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG = False
    TESTING = False

    # Enforce environment variables in production
    SECRET_KEY = os.environ["SECRET_KEY"]
    APP_URL = os.environ["APP_URL"]

    # Never leak file paths to clients
    EXPOSE_EXCEPTIONS = False

    # Production logging
    LOG_LEVEL = "WARNING"
    LOG_TO_STDOUT = True
