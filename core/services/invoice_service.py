"""
Invoice service: one SQL statement per mutation.

Amounts arrive in dollars on the validated form and are written in cents.
The date column is stamped with today's UTC date on create and on update.
Every driver failure is re-raised as StorageError, as is a RETURNING row
that does not parse into an Invoice.
"""

import logging

import psycopg2
from pydantic import ValidationError

from clients.postgres_client import PostgresClient
from core.errors import StorageError
from core.models import Invoice, InvoiceForm
from utils.timezone import today_utc

logger = logging.getLogger(__name__)


class InvoiceService:
    """Service for invoice writes."""

    def __init__(self, postgres: PostgresClient):
        self.postgres = postgres

    def create(self, form: InvoiceForm) -> Invoice:
        """
        Insert a new invoice.

        Args:
            form: Validated form fields

        Returns:
            Created invoice, with the id assigned by storage

        Raises:
            StorageError: If the INSERT fails for any reason
        """
        try:
            row = self.postgres.execute_returning(
                """
                INSERT INTO invoices (customer_id, amount, status, date)
                VALUES (%s, %s, %s, %s)
                RETURNING id::text AS id, customer_id::text AS customer_id,
                          amount, status, date
                """,
                (form.customer_id, form.amount_in_cents, form.status.value, today_utc())
            )[0]
            invoice = Invoice.model_validate(row)
        except psycopg2.Error as e:
            raise StorageError("Failed to insert invoice") from e
        except ValidationError as e:
            raise StorageError("Inserted invoice row did not parse") from e

        logger.info("Created invoice %s (%d cents)", invoice.id, invoice.amount)
        return invoice

    def update(self, invoice_id: str, form: InvoiceForm) -> int:
        """
        Overwrite every mutable field of an invoice.

        No existence check: an id that matches nothing updates zero rows
        and is not an error.

        Args:
            invoice_id: Invoice to overwrite
            form: Validated form fields

        Returns:
            Number of rows updated (0 or 1)

        Raises:
            StorageError: If the UPDATE fails for any reason
        """
        try:
            updated = self.postgres.execute_rowcount(
                """
                UPDATE invoices
                SET customer_id = %s, amount = %s, status = %s, date = %s
                WHERE id = %s
                """,
                (form.customer_id, form.amount_in_cents, form.status.value, today_utc(), invoice_id)
            )
        except psycopg2.Error as e:
            raise StorageError(f"Failed to update invoice {invoice_id}") from e

        if updated == 0:
            logger.warning("Update matched no invoice with id %s", invoice_id)
        return updated

    def delete(self, invoice_id: str) -> int:
        """
        Permanently delete an invoice.

        Returns:
            Number of rows deleted (0 or 1)

        Raises:
            StorageError: If the DELETE fails for any reason
        """
        try:
            deleted = self.postgres.execute_rowcount(
                "DELETE FROM invoices WHERE id = %s",
                (invoice_id,)
            )
        except psycopg2.Error as e:
            raise StorageError(f"Failed to delete invoice {invoice_id}") from e

        if deleted == 0:
            logger.warning("Delete matched no invoice with id %s", invoice_id)
        return deleted
