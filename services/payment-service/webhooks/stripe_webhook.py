"""Stripe webhook handler - checkout.session.completed / async_payment_succeeded."""

import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from fulfillment import fulfill_checkout
from packages.shared.errors import VerificationError, create_error_response
from packages.shared.errors.middleware import get_request_id
from stripe_adapter import construct_webhook_event

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stripe", tags=["Webhooks"])

FULFILLMENT_EVENTS = frozenset({
    "checkout.session.completed",
    "checkout.session.async_payment_succeeded",
})


@router.post("/webhook")
async def stripe_webhook(request: Request):
    """
    Handle Stripe webhooks.
    Unverifiable events get 400. Every verified event gets 200, including
    types we do not act on, so Stripe stops retrying them.
    """
    payload = await request.body()
    sig_header = request.headers.get("stripe-signature", "")

    try:
        event = construct_webhook_event(payload, sig_header)
    except VerificationError as e:
        logger.warning("Webhook Error: %s", e.message)
        return PlainTextResponse(f"Webhook Error: {e.message}", status_code=400)

    event_type = event.type
    if event_type not in FULFILLMENT_EVENTS:
        logger.info("Ignoring Stripe event %s (%s)", event.id, event_type)
        return Response(status_code=200)

    session_id = event.data.object.id
    request_id = get_request_id(request)
    try:
        await fulfill_checkout(session_id, request_id=request_id)
    except Exception as e:
        # 500 so Stripe redelivers; fulfillment is idempotent.
        logger.error("Fulfillment failed for session %s: %s", session_id, e, exc_info=True)
        body = create_error_response("Failed to fulfill checkout", e, request_id=request_id)
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))

    return Response(status_code=200)
