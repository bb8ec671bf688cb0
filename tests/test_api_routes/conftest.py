"""
Fixtures for route tests: a full application on the in-memory backend.
"""
import pytest
from fastapi.testclient import TestClient

from storefront.app import create_app
from storefront.config import Settings


@pytest.fixture
def app():
    return create_app(Settings(storage_backend="memory", seed_data=False))


@pytest.fixture
def client(app):
    """Create a test client; entering it runs the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client
