"""Tests for booking/hotel models and the stay-length quantity."""

from datetime import datetime

from models import Booking, Hotel, PaymentStatus, SessionStatusResponse


def test_two_night_stay(make_booking):
    booking = make_booking(check_in=datetime(2024, 1, 1), check_out=datetime(2024, 1, 3))
    assert booking.number_of_nights() == 2


def test_partial_day_rounds_up(make_booking):
    booking = make_booking(
        check_in=datetime(2024, 1, 1, 14, 0),
        check_out=datetime(2024, 1, 3, 11, 0),
    )
    assert booking.number_of_nights() == 2

    booking = make_booking(
        check_in=datetime(2024, 1, 1, 11, 0),
        check_out=datetime(2024, 1, 3, 14, 0),
    )
    assert booking.number_of_nights() == 3


def test_non_positive_stay_is_not_clamped(make_booking):
    same_day = make_booking(check_in=datetime(2024, 1, 3), check_out=datetime(2024, 1, 3))
    reversed_stay = make_booking(check_in=datetime(2024, 1, 3), check_out=datetime(2024, 1, 1))
    assert same_day.number_of_nights() == 0
    assert reversed_stay.number_of_nights() == -2


def test_booking_parses_iso_strings_and_keeps_extra_columns():
    booking = Booking.model_validate({
        "id": "B1",
        "hotel_id": "H1",
        "check_in": "2024-01-01T00:00:00Z",
        "check_out": "2024-01-03T00:00:00Z",
        "payment_status": "PAID",
        "guest_name": "Ada",
    })
    assert booking.is_paid
    assert booking.payment_status is PaymentStatus.PAID
    assert booking.model_dump()["guest_name"] == "Ada"


def test_payment_status_defaults_to_unpaid():
    booking = Booking(
        id="B2",
        hotel_id="H1",
        check_in=datetime(2024, 1, 1),
        check_out=datetime(2024, 1, 2),
    )
    assert booking.payment_status is PaymentStatus.UNPAID
    assert not booking.is_paid


def test_session_status_serializes_wire_keys():
    view = SessionStatusResponse(
        booking_id="B1",
        booking={"id": "B1"},
        hotel={"id": "H1"},
        status="complete",
        customer_email="guest@example.com",
        payment_status=PaymentStatus.UNPAID,
    )
    data = view.model_dump(mode="json", by_alias=True)
    assert set(data) == {"bookingId", "booking", "hotel", "status", "customer_email", "paymentStatus"}
    assert data["paymentStatus"] == "UNPAID"


def test_integer_ids_are_carried_as_strings():
    booking = Booking.model_validate({
        "id": 17,
        "hotel_id": 4,
        "check_in": "2024-01-01",
        "check_out": "2024-01-02",
        "payment_status": "UNPAID",
    })
    hotel = Hotel.model_validate({"id": 4, "stripe_price_id": "price_123"})
    assert booking.id == "17"
    assert booking.hotel_id == "4"
    assert hotel.id == "4"


def test_null_payment_status_reads_as_unpaid():
    booking = Booking.model_validate({
        "id": "B1",
        "hotel_id": "H1",
        "check_in": "2024-01-01",
        "check_out": "2024-01-02",
        "payment_status": None,
    })
    assert booking.payment_status is PaymentStatus.UNPAID
