"""
Collaborators notified after a successful invoice mutation.

InvoiceActions only talks to these interfaces, so it runs the same under
FastAPI, in a worker, or in tests with mocks.
"""

from typing import Protocol

from core.models import Redirect


class CacheInvalidator(Protocol):
    """Marks a previously rendered view as stale."""

    def mark_stale(self, view: str) -> None:
        ...


class Navigator(Protocol):
    """Sends the caller to the invoices listing."""

    def to_listing(self) -> Redirect:
        ...


class ListingNavigator:
    """Navigator that redirects to a fixed listing path."""

    def __init__(self, listing_path: str = "/dashboard/invoices"):
        self.listing_path = listing_path

    def to_listing(self) -> Redirect:
        return Redirect(location=self.listing_path)
