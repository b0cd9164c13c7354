"""Stripe adapter - embedded Checkout Sessions and webhook verification."""

import logging
from typing import List, Optional

import stripe

from config import settings
from packages.shared.errors import ConfigurationError, GatewayError, VerificationError

logger = logging.getLogger(__name__)

METADATA_BOOKING_KEY = "bookingId"
RETURN_PATH = "/booking/complete?session_id={CHECKOUT_SESSION_ID}"


def _ensure_stripe_configured():
    if not settings.stripe_configured:
        raise ConfigurationError("Stripe not configured (STRIPE_SECRET_KEY)")
    stripe.api_key = settings.stripe_secret_key


def return_url() -> str:
    """Frontend page Stripe sends the customer back to after payment."""
    return f"{settings.frontend_url}{RETURN_PATH}"


async def create_checkout_session(
    booking_id: str, price_id: str, quantity: int
) -> stripe.checkout.Session:
    """
    Create an embedded-mode Checkout Session for one booking.
    The booking id travels in metadata; it is the only link back from Stripe.
    """
    _ensure_stripe_configured()
    try:
        return await stripe.checkout.Session.create_async(
            ui_mode="embedded",
            mode="payment",
            line_items=[{"price": price_id, "quantity": quantity}],
            return_url=return_url(),
            metadata={METADATA_BOOKING_KEY: booking_id},
        )
    except stripe.StripeError as e:
        logger.warning("Stripe session create failed: %s", e)
        raise GatewayError(f"Stripe session create failed: {e}") from e


async def retrieve_checkout_session(
    session_id: str, expand: Optional[List[str]] = None
) -> stripe.checkout.Session:
    """Retrieve Checkout Session from Stripe, the source of truth for its state."""
    _ensure_stripe_configured()
    try:
        if expand:
            return await stripe.checkout.Session.retrieve_async(session_id, expand=expand)
        return await stripe.checkout.Session.retrieve_async(session_id)
    except stripe.StripeError as e:
        logger.warning("Stripe session retrieve failed: %s", e)
        raise GatewayError(f"Stripe session retrieve failed: {e}") from e


def construct_webhook_event(payload: bytes, sig_header: str) -> stripe.Event:
    """Verify signature over the exact request bytes and parse the event."""
    if not settings.stripe_webhook_secret:
        raise ConfigurationError("Webhook secret not configured (STRIPE_WEBHOOK_SECRET)")
    try:
        return stripe.Webhook.construct_event(
            payload, sig_header, settings.stripe_webhook_secret
        )
    except ValueError as e:
        raise VerificationError(f"Invalid payload: {e}") from e
    except stripe.SignatureVerificationError as e:
        raise VerificationError(f"Invalid signature: {e}") from e


def booking_id_from_session(session: stripe.checkout.Session) -> Optional[str]:
    """Booking id from session metadata, or None for foreign sessions."""
    metadata = getattr(session, "metadata", None)
    if not metadata or METADATA_BOOKING_KEY not in metadata:
        return None
    return metadata[METADATA_BOOKING_KEY] or None
