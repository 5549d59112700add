"""Invoice domain models.

Amounts are entered in dollars and stored in cents (integer) to avoid
floating point issues. $49.99 = 4999 cents.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from pydantic import BaseModel, Field, field_validator


def to_cents(amount: Decimal) -> int:
    """Dollars to cents, rounded half-up to the nearest cent."""
    return int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))


class InvoiceStatus(str, Enum):
    """Invoice payment status."""

    PENDING = "pending"
    PAID = "paid"


class InvoiceForm(BaseModel):
    """
    Validated invoice form fields.

    Only the HTML form names (customerId, amount, status) are read. id and
    date are not part of the form: storage assigns the id and the mutator
    stamps the date.
    """

    customer_id: str = Field(..., alias="customerId", min_length=1)
    amount: Decimal = Field(..., gt=0, allow_inf_nan=False)  # Dollars
    status: InvoiceStatus

    @field_validator("amount")
    @classmethod
    def amount_at_least_one_cent(cls, v: Decimal) -> Decimal:
        if to_cents(v) <= 0:
            raise ValueError("amount rounds to zero cents")
        return v

    @property
    def amount_in_cents(self) -> int:
        """Amount in minor units, rounded half-up to the nearest cent."""
        return to_cents(self.amount)


class Invoice(BaseModel):
    """Invoice row as stored."""

    id: str
    customer_id: str
    amount: int  # Cents
    status: InvoiceStatus
    date: date

    model_config = {"from_attributes": True}
