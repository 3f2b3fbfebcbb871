"""Testing environment configuration."""
from config.base import BaseConfig
import os


class TestingConfig(BaseConfig):
    """Testing configuration."""

    TESTING = True
    DEBUG = True

    # Explicitly set SECRET_KEY for testing
    SECRET_KEY = os.getenv("SECRET_KEY", "test-secret-key-for-testing")

    # Fixed values so envelopes are predictable in tests
    APP_URL = "https://api.test.local"
    MAIL_FROM_ADDRESS = "api@test.local"
    API_VERSION = "1.0.1"

    EXPOSE_EXCEPTIONS = True
    LOG_LEVEL = "WARNING"
