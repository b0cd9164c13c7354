"""Error response body shared by all payment routes."""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Failure body: what was attempted and why it failed."""

    message: str = Field(..., description="Operation that failed")
    error: str = Field(..., description="Underlying error message")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


def create_error_response(
    message: str,
    exc: Optional[BaseException] = None,
    request_id: Optional[str] = None,
) -> ErrorResponse:
    """Build an error body from an exception, falling back to 'Unknown error'."""
    error = str(exc) if exc is not None and str(exc) else "Unknown error"
    return ErrorResponse(message=message, error=error, request_id=request_id)
