"""Standardized error handling for the payment service."""

from .models import ErrorResponse, create_error_response
from .exceptions import (
    PaymentsException,
    NotFoundError,
    ConfigurationError,
    GatewayError,
    VerificationError,
    MetadataMissingError,
)

__all__ = [
    "ErrorResponse",
    "create_error_response",
    "PaymentsException",
    "NotFoundError",
    "ConfigurationError",
    "GatewayError",
    "VerificationError",
    "MetadataMissingError",
]
