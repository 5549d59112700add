"""
Invoice mutation handlers invoked from form submissions.

Each handler validates (create/update), runs one statement through
InvoiceService, marks the listing view stale, and then either redirects to
the listing (create/update) or returns an empty state (delete). Failures
come back as ActionState values; nothing here raises to the caller.
"""

import logging
from typing import Any, Mapping

from core.collaborators import CacheInvalidator, Navigator
from core.errors import InvoiceActionError
from core.models import ActionState, Redirect
from core.services.invoice_service import InvoiceService
from core.validation import Invalid, validate_invoice_form

logger = logging.getLogger(__name__)

LISTING_VIEW = "/dashboard/invoices"


def form_to_dict(form_data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Flatten submitted form data to one value per field.

    Multi-valued form data (starlette FormData, werkzeug MultiDict) keeps
    the last value submitted for a key.
    """
    multi_items = getattr(form_data, "multi_items", None)
    if multi_items is not None:
        return dict(multi_items())
    return dict(form_data.items())


class InvoiceActions:
    """Create, update and delete handlers for the invoice forms."""

    def __init__(
        self,
        service: InvoiceService,
        cache: CacheInvalidator,
        navigator: Navigator,
        listing_view: str = LISTING_VIEW,
    ):
        self.service = service
        self.cache = cache
        self.navigator = navigator
        self.listing_view = listing_view

    def create_invoice(
        self, prev_state: ActionState | None, form_data: Mapping[str, Any]
    ) -> ActionState | Redirect:
        """
        Create an invoice from a form submission.

        Args:
            prev_state: Previous form state; accepted and ignored
            form_data: Submitted fields (customerId, amount, status)

        Returns:
            Redirect to the listing on success, otherwise the form state
            carrying field errors and/or a message
        """
        result = validate_invoice_form(form_to_dict(form_data))
        if isinstance(result, Invalid):
            return ActionState(
                errors=result.errors,
                message="Missing Fields. Failed to Create Invoice.",
            )

        try:
            self.service.create(result.form)
            self.cache.mark_stale(self.listing_view)
        except InvoiceActionError:
            logger.exception("Failed to create invoice")
            return ActionState(message="Database Error: Failed to Create Invoice.")

        return self.navigator.to_listing()

    def update_invoice(
        self,
        prev_state: ActionState | None,
        form_data: Mapping[str, Any],
        invoice_id: str,
    ) -> ActionState | Redirect:
        """
        Overwrite an invoice from a form submission.

        The id is taken as given; updating an id that matches nothing is
        indistinguishable from success.
        """
        result = validate_invoice_form(form_to_dict(form_data))
        if isinstance(result, Invalid):
            return ActionState(
                errors=result.errors,
                message="Missing Fields. Failed to Update Invoice.",
            )

        try:
            self.service.update(invoice_id, result.form)
            self.cache.mark_stale(self.listing_view)
        except InvoiceActionError:
            logger.exception("Failed to update invoice %s", invoice_id)
            return ActionState(message="Database Error: Failed to Update Invoice.")

        return self.navigator.to_listing()

    def delete_invoice_by_id(self, invoice_id: str) -> ActionState:
        """Delete an invoice. Never navigates; an empty state means success."""
        try:
            self.service.delete(invoice_id)
            self.cache.mark_stale(self.listing_view)
        except InvoiceActionError:
            logger.exception("Failed to delete invoice %s", invoice_id)
            return ActionState(message="Database Error: Failed to delete Invoice.")

        return ActionState()
