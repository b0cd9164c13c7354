"""Booking, hotel and request/response models."""

import math
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

SECONDS_PER_DAY = 24 * 60 * 60


class PaymentStatus(str, Enum):
    """Booking payment status. Only UNPAID -> PAID is ever written."""

    UNPAID = "UNPAID"
    PAID = "PAID"


class Booking(BaseModel):
    """Row from the bookings table. Extra columns are kept for the status view."""

    model_config = ConfigDict(extra="allow")

    id: str
    hotel_id: str
    check_in: datetime
    check_out: datetime
    payment_status: PaymentStatus = PaymentStatus.UNPAID

    @field_validator("id", "hotel_id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        """Integer primary keys are carried as strings."""
        return str(value) if isinstance(value, int) else value

    @field_validator("payment_status", mode="before")
    @classmethod
    def null_status_is_unpaid(cls, value):
        return PaymentStatus.UNPAID if value is None else value

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    def number_of_nights(self) -> int:
        """Stay length in days, rounded up. Zero or negative when check_out <= check_in."""
        seconds = (self.check_out - self.check_in).total_seconds()
        return math.ceil(seconds / SECONDS_PER_DAY)


class Hotel(BaseModel):
    """Row from the hotels table."""

    model_config = ConfigDict(extra="allow")

    id: str
    stripe_price_id: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return str(value) if isinstance(value, int) else value


class CheckoutSessionBody(BaseModel):
    """Create embedded Checkout Session for a booking."""

    model_config = ConfigDict(populate_by_name=True)

    booking_id: str = Field(..., alias="bookingId")


class CheckoutSessionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(..., alias="clientSecret")


class SessionStatusResponse(BaseModel):
    """Session, booking and hotel joined for client polling after checkout.

    ``paymentStatus`` is the booking's own field and lags ``status`` until the
    webhook has been processed.
    """

    model_config = ConfigDict(populate_by_name=True)

    booking_id: str = Field(..., alias="bookingId")
    booking: Dict[str, Any]
    hotel: Dict[str, Any]
    status: Optional[str] = None
    customer_email: Optional[str] = None
    payment_status: PaymentStatus = Field(..., alias="paymentStatus")
