"""Results handed back to the form that triggered a mutation."""

from pydantic import BaseModel, Field


class ActionState(BaseModel):
    """
    Form state after a mutation attempt.

    errors maps a form field name to its messages in order. An empty state
    (no errors, no message) means the mutation succeeded.
    """

    errors: dict[str, list[str]] | None = None
    message: str | None = None


class Redirect(BaseModel):
    """Instruction to send the caller to another route."""

    location: str = Field(..., min_length=1)
