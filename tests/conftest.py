"""Pytest configuration and fixtures."""
import pytest
from marshmallow import Schema, fields

from adminui_api import create_app
from adminui_api.utils.response import ResponseFormatter, ResponseSettings


@pytest.fixture(scope="session")
def app():
    """Create application for testing."""
    app = create_app("testing")
    return app


@pytest.fixture(scope="function")
def app_context(app):
    """Push an application context for calling the response wrappers."""
    with app.app_context():
        yield app


@pytest.fixture(scope="function")
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope="function")
def fresh_app():
    """Create an application that tests can still add routes to."""
    return create_app("testing")


@pytest.fixture
def settings():
    """Explicit envelope settings."""
    return ResponseSettings(
        company_website="https://example.com",
        company_email="api@example.com",
        api_version="2.3.4",
        api_author="https://author.example.com",
        api_email="support@example.com",
    )


@pytest.fixture
def formatter(settings):
    """Formatter bound to the explicit settings."""
    return ResponseFormatter(settings)


class ItemSchema(Schema):
    """Schema used to serialize test items."""

    id = fields.Int()
    name = fields.Str()


@pytest.fixture
def item_schema():
    return ItemSchema


@pytest.fixture
def items():
    return [{"id": i, "name": f"Item {i}", "secret": "hidden"} for i in range(1, 8)]


@pytest.fixture
def raised():
    """Return a helper that raises and catches an exception so it carries a traceback."""

    def _raised(exception):
        try:
            raise exception
        except BaseException as caught:
            return caught

    return _raised
