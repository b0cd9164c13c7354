"""Payment checkout API - embedded Checkout Session and session status."""

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from checkout_service import create_checkout_session_for_booking, get_session_status
from models import CheckoutSessionBody, CheckoutSessionResponse
from packages.shared.errors import create_error_response
from packages.shared.errors.middleware import get_request_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payments", tags=["Payment"])


def _failure(request: Request, message: str, exc: Exception) -> JSONResponse:
    request_id = get_request_id(request)
    body = create_error_response(message, exc, request_id=request_id)
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


@router.post("/checkout-session")
async def create_checkout_session_route(body: CheckoutSessionBody, request: Request):
    """
    Create Stripe Checkout Session for a booking.
    Returns clientSecret for the frontend's embedded checkout.
    """
    try:
        client_secret = await create_checkout_session_for_booking(body.booking_id)
    except Exception as e:
        logger.error("Error creating checkout session: %s", e, exc_info=True)
        return _failure(request, "Failed to create checkout session", e)
    return CheckoutSessionResponse(client_secret=client_secret).model_dump(by_alias=True)


@router.get("/session-status")
async def session_status_route(request: Request, session_id: str = Query(...)):
    """Session status, customer email and the booking's own payment status."""
    try:
        status = await get_session_status(session_id)
    except Exception as e:
        logger.error("Error retrieving session status: %s", e, exc_info=True)
        return _failure(request, "Failed to retrieve session status", e)
    return status.model_dump(mode="json", by_alias=True)
