"""FastAPI error handling middleware."""

import logging
import uuid
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from .models import create_error_response

logger = logging.getLogger(__name__)


def get_request_id(request: Request) -> str:
    """Get or create request ID for correlation."""
    request_id = request.headers.get("X-Request-ID") or getattr(
        request.state, "request_id", None
    )
    if not request_id:
        request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    return request_id


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    """Add request ID to all requests for tracing."""
    request_id = get_request_id(request)
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions - return 500 with the error message."""
    request_id = get_request_id(request)

    error_response = create_error_response(
        message="An unexpected error occurred",
        exc=exc,
        request_id=request_id,
    )

    logger.exception(
        "Unhandled exception",
        extra={"request_id": request_id},
        exc_info=exc,
    )

    return JSONResponse(
        status_code=500,
        content=error_response.model_dump(exclude_none=True),
        headers={"X-Request-ID": request_id},
    )
