"""Error envelope for failures outside the invoice form contract."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from utils.timezone import now_utc


class APIError(BaseModel):
    """Error details in API response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class APIMeta(BaseModel):
    """Metadata included in every error response."""

    timestamp: datetime = Field(..., description="Response timestamp (UTC)")
    request_id: str = Field(..., description="Unique request identifier for tracing")


class APIResponse(BaseModel):
    """
    Envelope for routing and server errors.

    Form submissions answer with ActionState or a redirect instead; this
    shape only appears when a request never reached an invoice handler or
    the handler itself blew up.
    """

    success: bool
    error: APIError | None = None
    meta: APIMeta


def error_response(code: str, message: str, request_id: str | None = None) -> APIResponse:
    """Create an error response, reusing the request's ID when known."""
    return APIResponse(
        success=False,
        error=APIError(code=code, message=message),
        meta=APIMeta(
            timestamp=now_utc(),
            request_id=request_id or str(uuid4()),
        ),
    )


class ErrorCodes:
    """Standard error codes for consistent error handling."""

    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INVALID_REQUEST = "INVALID_REQUEST"
    INTERNAL_ERROR = "INTERNAL_ERROR"
