"""Checkout Session creation and session status for client polling."""

import logging

import stripe_adapter
from db import get_booking, get_hotel
from models import Booking, Hotel, SessionStatusResponse
from packages.shared.errors import (
    ConfigurationError,
    GatewayError,
    MetadataMissingError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


async def _load_booking_and_hotel(booking_id: str) -> tuple[Booking, Hotel]:
    booking = await get_booking(booking_id)
    if not booking:
        raise NotFoundError("Booking not found", details={"booking_id": booking_id})
    hotel = await get_hotel(booking.hotel_id)
    if not hotel:
        raise NotFoundError("Hotel not found", details={"hotel_id": booking.hotel_id})
    return booking, hotel


async def create_checkout_session_for_booking(booking_id: str) -> str:
    """
    Create an embedded Checkout Session charging the hotel's Stripe price once per night.
    Returns the client secret the frontend mounts Stripe's checkout with.
    """
    logger.info("Creating checkout session for booking %s", booking_id)
    booking, hotel = await _load_booking_and_hotel(booking_id)

    nights = booking.number_of_nights()
    if nights <= 0:
        # Passed through as-is; Stripe rejects non-positive quantities.
        logger.warning(
            "Booking %s has non-positive stay length (%s nights): check_in=%s check_out=%s",
            booking.id,
            nights,
            booking.check_in.isoformat(),
            booking.check_out.isoformat(),
        )

    if not hotel.stripe_price_id:
        raise ConfigurationError(
            "Stripe price ID is missing for this hotel",
            details={"hotel_id": hotel.id},
        )

    session = await stripe_adapter.create_checkout_session(
        booking_id=booking.id,
        price_id=hotel.stripe_price_id,
        quantity=nights,
    )
    client_secret = getattr(session, "client_secret", None)
    if not client_secret:
        raise GatewayError("Stripe did not return a client secret")

    logger.info("Checkout session %s created for booking %s", session.id, booking.id)
    return client_secret


async def get_session_status(session_id: str) -> SessionStatusResponse:
    """Join the Stripe session with its booking and hotel."""
    session = await stripe_adapter.retrieve_checkout_session(session_id)
    booking_id = stripe_adapter.booking_id_from_session(session)
    if not booking_id:
        raise MetadataMissingError(details={"session_id": session_id})

    booking, hotel = await _load_booking_and_hotel(booking_id)
    customer_details = getattr(session, "customer_details", None)

    return SessionStatusResponse(
        booking_id=booking.id,
        booking=booking.model_dump(mode="json"),
        hotel=hotel.model_dump(mode="json"),
        status=getattr(session, "status", None),
        customer_email=getattr(customer_details, "email", None),
        payment_status=booking.payment_status,
    )
