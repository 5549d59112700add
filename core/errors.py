"""Exceptions raised below the invoice mutation boundary."""


class InvoiceActionError(Exception):
    """Base for failures that InvoiceActions turns into a fixed message."""


class StorageError(InvoiceActionError):
    """
    A SQL statement against the invoices table failed.

    Constraint violations, connectivity problems and pool exhaustion all
    land here undifferentiated. The original driver error is chained as
    __cause__.
    """


class CacheInvalidationError(InvoiceActionError):
    """The listing view could not be marked stale."""
