"""Shared test fixtures for the invoice actions test suite."""

import os
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from dotenv import load_dotenv

# Load .env file BEFORE any other imports that might use env vars
# override=True ensures .env takes precedence over shell env vars
load_dotenv(Path(__file__).parent.parent / ".env", override=True)

# Reset vault client singleton to pick up env vars
import clients.vault_client as vault_module
vault_module._vault_client_instance = None
vault_module._secret_cache.clear()

from clients.postgres_client import PostgresClient
from core.actions import InvoiceActions
from core.collaborators import CacheInvalidator, ListingNavigator
from core.services.invoice_service import InvoiceService


# =============================================================================
# CONSTANTS
# =============================================================================

TODAY = "2026-10-19"
LISTING_PATH = "/dashboard/invoices"
INVOICE_ID = "3958dc9e-712f-4377-85e9-fec4b6a6442a"
CUSTOMER_ID = "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa"


def _vault_configured() -> bool:
    return all(os.getenv(var) for var in ("VAULT_ADDR", "VAULT_ROLE_ID", "VAULT_SECRET_ID"))


@pytest.fixture
def live_vault():
    """Skip unless a real Vault is configured in the environment."""
    if not _vault_configured():
        pytest.skip("Vault not configured")


# =============================================================================
# UNIT FIXTURES - mocked storage and collaborators
# =============================================================================


@pytest.fixture
def frozen_today():
    """Pin the invoice date stamp to TODAY."""
    with patch("core.services.invoice_service.today_utc", return_value=TODAY):
        yield TODAY


@pytest.fixture
def mock_postgres():
    """PostgresClient stand-in; INSERTs echo back a stored row."""
    mock = Mock(spec=PostgresClient)
    mock.execute_returning.return_value = [{
        "id": INVOICE_ID,
        "customer_id": CUSTOMER_ID,
        "amount": 4999,
        "status": "paid",
        "date": TODAY,
    }]
    mock.execute_rowcount.return_value = 1
    return mock


@pytest.fixture
def invoice_service(mock_postgres):
    return InvoiceService(mock_postgres)


@pytest.fixture
def mock_cache():
    return Mock(spec=CacheInvalidator)


@pytest.fixture
def navigator():
    return ListingNavigator(LISTING_PATH)


@pytest.fixture
def actions(invoice_service, mock_cache, navigator):
    return InvoiceActions(invoice_service, mock_cache, navigator)


# =============================================================================
# INTEGRATION FIXTURES - real services, URLs from Vault
# =============================================================================


@pytest.fixture(scope="session")
def db():
    """Session-scoped PostgresClient."""
    if not _vault_configured():
        pytest.skip("Vault not configured")

    from clients.vault_client import get_database_url

    client = PostgresClient(get_database_url())
    yield client
    client.close()


@pytest.fixture(scope="session")
def valkey():
    """Session-scoped ValkeyClient."""
    if not _vault_configured():
        pytest.skip("Vault not configured")

    from clients.valkey_client import ValkeyClient
    from clients.vault_client import get_valkey_url

    client = ValkeyClient(get_valkey_url())
    yield client
    client.close()
