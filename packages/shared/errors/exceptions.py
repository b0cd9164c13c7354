"""Custom exceptions for the booking payments service.

Routes map every failure to an HTTP status; there are no error codes beyond it.
"""

from typing import Any, Optional


class PaymentsException(Exception):
    """Base exception for the booking payments bridge."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(PaymentsException):
    """Referenced booking or hotel does not exist."""


class ConfigurationError(PaymentsException):
    """Missing configuration: env settings or a hotel without a Stripe price."""


class GatewayError(PaymentsException):
    """Stripe failed or did not return the expected data."""


class VerificationError(PaymentsException):
    """Webhook signature invalid or payload malformed."""


class MetadataMissingError(PaymentsException):
    """Checkout session carries no bookingId metadata."""

    def __init__(
        self,
        message: str = "Missing bookingId in session metadata",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, details)
