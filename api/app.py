"""
Application wiring.

Run with:
    uvicorn --factory api.app:app_factory
"""

import logging

from fastapi import FastAPI

from api.errors import register_error_handlers
from api.invoices import create_invoices_router
from api.middleware import RequestIDMiddleware
from clients.postgres_client import PostgresClient
from clients.valkey_client import ValkeyClient
from clients.vault_client import get_database_url, get_valkey_url
from clients.view_cache import ValkeyViewCache
from core.actions import InvoiceActions
from core.collaborators import ListingNavigator
from core.config import InvoicesConfig
from core.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)


def build_actions(config: InvoicesConfig) -> InvoiceActions:
    """Connect to Postgres and Valkey (URLs from Vault) and wire the handlers."""
    postgres = PostgresClient(
        get_database_url(),
        min_connections=config.pool_min_connections,
        max_connections=config.pool_max_connections,
        connect_timeout=config.connect_timeout_seconds,
    )
    valkey = ValkeyClient(get_valkey_url())

    return InvoiceActions(
        service=InvoiceService(postgres),
        cache=ValkeyViewCache(valkey, key_prefix=config.view_cache_prefix),
        navigator=ListingNavigator(config.listing_path),
        listing_view=config.listing_path,
    )


def create_app(actions: InvoiceActions, config: InvoicesConfig | None = None) -> FastAPI:
    """FastAPI app with request IDs, error handlers and the invoice form routes."""
    config = config or InvoicesConfig()

    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)
    app.include_router(create_invoices_router(actions, config))

    return app


def app_factory() -> FastAPI:
    config = InvoicesConfig()
    app = create_app(build_actions(config), config)
    logger.info("Invoice app ready, listing at %s", config.listing_path)
    return app
