"""Core domain models."""

from core.models.invoice import Invoice, InvoiceForm, InvoiceStatus
from core.models.action_state import ActionState, Redirect

__all__ = [
    # Invoice
    "Invoice", "InvoiceForm", "InvoiceStatus",
    # Action results
    "ActionState", "Redirect",
]
