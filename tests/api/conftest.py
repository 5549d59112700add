"""API test fixtures - FastAPI app over InvoiceActions with mocked storage."""

import pytest
from starlette.testclient import TestClient

from api.app import create_app
from core.config import InvoicesConfig


@pytest.fixture
def config():
    return InvoicesConfig()


@pytest.fixture
def app(actions, config):
    """App with request IDs, error handlers and invoice form routes."""
    return create_app(actions, config)


@pytest.fixture
def client(app):
    """Test client that does not follow redirects."""
    return TestClient(app, raise_server_exceptions=False, follow_redirects=False)
