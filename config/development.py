"""Development environment configuration."""
from config.base import BaseConfig
import os

class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True

    # Exception details help while developing
    EXPOSE_EXCEPTIONS = os.getenv("EXPOSE_EXCEPTIONS", "True").lower() == "true"

    # More verbose logging in development
    LOG_LEVEL = "DEBUG"
    LOG_TO_STDOUT = True
