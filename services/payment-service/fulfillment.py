"""Fulfillment - reconcile a paid Checkout Session with its booking."""

import logging
from enum import Enum
from typing import Optional

import stripe_adapter
from db import get_booking, mark_booking_paid
from packages.shared.errors import NotFoundError
from packages.shared.monitoring.logging import log_with_context

logger = logging.getLogger(__name__)

SESSION_PAID = "paid"


class FulfillmentResult(str, Enum):
    """Which branch fulfillment took."""

    FULFILLED = "fulfilled"
    ALREADY_PAID = "already_paid"
    NOT_PAID = "not_paid"
    MISSING_METADATA = "missing_metadata"


async def fulfill_checkout(session_id: str, request_id: Optional[str] = None) -> FulfillmentResult:
    """
    Mark the session's booking PAID once Stripe reports the session paid.

    The session is re-fetched rather than trusting the webhook payload.
    Safe to call any number of times for the same session: duplicate and
    out-of-order deliveries either skip or write the same PAID value.
    Sessions without booking metadata are logged and ignored.
    """
    log_with_context(
        logger,
        logging.INFO,
        f"Fulfilling checkout session {session_id}",
        request_id=request_id,
        session_id=session_id,
    )

    session = await stripe_adapter.retrieve_checkout_session(session_id, expand=["line_items"])

    booking_id = stripe_adapter.booking_id_from_session(session)
    if not booking_id:
        log_with_context(
            logger,
            logging.WARNING,
            f"Missing bookingId in metadata of session {session_id}",
            request_id=request_id,
            session_id=session_id,
        )
        return FulfillmentResult.MISSING_METADATA

    booking = await get_booking(booking_id)
    if not booking:
        raise NotFoundError("Booking not found", details={"booking_id": booking_id})

    if booking.is_paid:
        log_with_context(
            logger,
            logging.INFO,
            f"Booking {booking_id} already PAID, skipping",
            request_id=request_id,
            session_id=session_id,
            booking_id=booking_id,
        )
        return FulfillmentResult.ALREADY_PAID

    payment_status = getattr(session, "payment_status", None)
    if payment_status != SESSION_PAID:
        log_with_context(
            logger,
            logging.WARNING,
            f"Checkout session {session_id} not paid yet ({payment_status})",
            request_id=request_id,
            session_id=session_id,
            booking_id=booking_id,
            payment_status=payment_status,
        )
        return FulfillmentResult.NOT_PAID

    await mark_booking_paid(booking_id)
    log_with_context(
        logger,
        logging.INFO,
        f"Booking {booking_id} marked PAID",
        request_id=request_id,
        session_id=session_id,
        booking_id=booking_id,
    )
    return FulfillmentResult.FULFILLED
