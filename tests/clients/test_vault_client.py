"""Tests for VaultClient - HashiCorp Vault secrets management."""

from unittest.mock import MagicMock, patch

import pytest
from hvac.exceptions import Forbidden, InvalidPath

import clients.vault_client as vault_module
from clients.vault_client import VaultClient, get_database_url, get_valkey_url


@pytest.fixture
def vault_env(monkeypatch):
    monkeypatch.setenv("VAULT_ADDR", "http://vault.test:8200")
    monkeypatch.setenv("VAULT_ROLE_ID", "role")
    monkeypatch.setenv("VAULT_SECRET_ID", "secret")
    monkeypatch.delenv("VAULT_NAMESPACE", raising=False)


@pytest.fixture
def hvac_client(vault_env):
    """hvac.Client replaced by a mock that authenticates and serves secrets."""
    client = MagicMock()
    client.auth.approle.login.return_value = {"auth": {"client_token": "token"}}
    client.is_authenticated.return_value = True
    client.secrets.kv.v2.read_secret_version.return_value = {
        "data": {"data": {"url": "postgresql://db.test/invoices"}}
    }

    with patch("clients.vault_client.hvac.Client", return_value=client):
        yield client


@pytest.fixture
def reset_vault_singleton():
    vault_module._vault_client_instance = None
    vault_module._secret_cache.clear()
    yield
    vault_module._vault_client_instance = None
    vault_module._secret_cache.clear()


class TestVaultClientInit:
    """Initialization and authentication."""

    def test_missing_vault_addr_raises(self, monkeypatch):
        monkeypatch.delenv("VAULT_ADDR", raising=False)

        with pytest.raises(ValueError, match="VAULT_ADDR"):
            VaultClient()

    def test_missing_approle_credentials_raises(self, vault_env, monkeypatch):
        monkeypatch.delenv("VAULT_ROLE_ID")

        with pytest.raises(ValueError, match="VAULT_ROLE_ID"):
            VaultClient()

    def test_failed_login_raises_permission_error(self, hvac_client):
        hvac_client.auth.approle.login.side_effect = Forbidden("bad role")

        with pytest.raises(PermissionError, match="authentication"):
            VaultClient()

    def test_sets_token_from_login(self, hvac_client):
        client = VaultClient()
        assert client.client.token == "token"


class TestGetSecret:
    """Secret retrieval - paths automatically scoped to invoices/."""

    def test_reads_scoped_path(self, hvac_client):
        url = VaultClient().get_secret("database", "url")

        assert url == "postgresql://db.test/invoices"
        hvac_client.secrets.kv.v2.read_secret_version.assert_called_once_with(
            path="invoices/database", raise_on_deleted_version=True
        )

    def test_missing_path_raises(self, hvac_client):
        hvac_client.secrets.kv.v2.read_secret_version.side_effect = InvalidPath()

        with pytest.raises(PermissionError, match="not found"):
            VaultClient().get_secret("nonexistent", "field")

    def test_missing_field_raises_keyerror(self, hvac_client):
        with pytest.raises(KeyError, match="not found"):
            VaultClient().get_secret("database", "nonexistent_field")


class TestConvenienceFunctions:
    """Module-level convenience functions."""

    def test_database_url_cached(self, hvac_client, reset_vault_singleton):
        assert get_database_url() == "postgresql://db.test/invoices"
        assert get_database_url() == "postgresql://db.test/invoices"

        assert hvac_client.secrets.kv.v2.read_secret_version.call_count == 1

    def test_valkey_url_reads_valkey_secret(self, hvac_client, reset_vault_singleton):
        hvac_client.secrets.kv.v2.read_secret_version.return_value = {
            "data": {"data": {"url": "redis://cache.test:6379/0"}}
        }

        assert get_valkey_url() == "redis://cache.test:6379/0"
        hvac_client.secrets.kv.v2.read_secret_version.assert_called_once_with(
            path="invoices/valkey", raise_on_deleted_version=True
        )

    def test_live_database_url(self, live_vault, reset_vault_singleton):
        """Against a configured Vault the URL is a PostgreSQL DSN."""
        assert get_database_url().startswith("postgresql://")
