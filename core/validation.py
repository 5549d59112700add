"""
Invoice form validation.

Turns a raw form submission (field name -> string) into either a validated
InvoiceForm or a per-field list of user-facing messages. Pure: no I/O.
"""

from dataclasses import dataclass
from typing import Mapping

from pydantic import ValidationError

from core.models import InvoiceForm

# One fixed message per form field, whatever pydantic's reason was
FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}

# Python field name -> form field name
_FORM_NAMES = {
    name: field.alias or name
    for name, field in InvoiceForm.model_fields.items()
}


@dataclass(frozen=True)
class Valid:
    form: InvoiceForm


@dataclass(frozen=True)
class Invalid:
    errors: dict[str, list[str]]


ValidationResult = Valid | Invalid


def validate_invoice_form(form_data: Mapping[str, str]) -> ValidationResult:
    """
    Validate and coerce invoice form fields.

    All fields are checked; a failure on one does not hide failures on the
    others. Keys outside the form (id, hidden framework fields) are ignored.

    Args:
        form_data: Flat mapping of form field name to submitted value

    Returns:
        Valid with the typed form, or Invalid with messages keyed by form
        field name (customerId, amount, status)
    """
    try:
        form = InvoiceForm.model_validate(dict(form_data))
    except ValidationError as e:
        return Invalid(errors=_field_errors(e))

    return Valid(form=form)


def _field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Collapse pydantic errors to ordered, de-duplicated messages per field."""
    errors: dict[str, list[str]] = {}

    for error in exc.errors():
        loc = error["loc"]
        raw_name = str(loc[0]) if loc else "form"
        field = _FORM_NAMES.get(raw_name, raw_name)
        message = FIELD_MESSAGES.get(field, error["msg"])

        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)

    return errors
