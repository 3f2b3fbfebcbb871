"""Base configuration for all environments."""
import os


class BaseConfig:
    """Base configuration class with common settings."""

    # Application
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    DEBUG = False
    TESTING = False

    # Company details injected into every response envelope
    APP_URL = os.getenv("APP_URL", "AdminUI Api")
    MAIL_FROM_ADDRESS = os.getenv("MAIL_FROM_ADDRESS", "api@adminui.co.uk")

    # API details injected into every response envelope
    API_VERSION = os.getenv("API_VERSION", "1.0.1")
    API_AUTHOR = "https://www.adminui.co.uk"
    API_SUPPORT_EMAIL = "support@adminui.co.uk"

    # Attach sanitized exception details (message, file, line, code) to error responses
    EXPOSE_EXCEPTIONS = os.getenv("EXPOSE_EXCEPTIONS", "False").lower() == "true"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_STDOUT = os.getenv("LOG_TO_STDOUT", "False").lower() == "true"

    # Pagination
    DEFAULT_PAGE_SIZE = 15
    MAX_PAGE_SIZE = 100
