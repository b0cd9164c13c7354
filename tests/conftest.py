"""Pytest configuration for payment service tests."""

import hashlib
import hmac
import json
import os
import sys
import time
from datetime import datetime
from pathlib import Path

import pytest
import stripe

_root = Path(__file__).resolve().parents[1]
_svc = _root / "services" / "payment-service"
sys.path.insert(0, str(_root))
sys.path.insert(0, str(_svc))

WEBHOOK_SECRET = "whsec_test_secret"


def _get_base_url() -> str:
    """Resolve payment service base URL from environment."""
    url = os.environ.get("PAYMENT_SERVICE_URL") or os.environ.get("API_BASE_URL")
    if not url:
        pytest.skip(
            "PAYMENT_SERVICE_URL or API_BASE_URL must be set for server tests. "
            "Example: export PAYMENT_SERVICE_URL=http://localhost:8000"
        )
    return url.rstrip("/")


@pytest.fixture(scope="session")
def payment_base_url() -> str:
    """Base URL for a running payment service (from env)."""
    return _get_base_url()


@pytest.fixture
def configured_settings(monkeypatch):
    """Settings with every required value present."""
    from config import settings

    monkeypatch.setattr(settings, "supabase_url", "https://example.supabase.co")
    monkeypatch.setattr(settings, "supabase_key", "service-key")
    monkeypatch.setattr(settings, "stripe_secret_key", "sk_test_123")
    monkeypatch.setattr(settings, "stripe_webhook_secret", WEBHOOK_SECRET)
    monkeypatch.setattr(settings, "frontend_url", "http://localhost:5173")
    return settings


@pytest.fixture
def make_booking():
    """Factory for Booking models; defaults to a two-night UNPAID stay at H1."""
    from models import Booking

    def _make(**overrides):
        fields = {
            "id": "B1",
            "hotel_id": "H1",
            "check_in": datetime(2024, 1, 1),
            "check_out": datetime(2024, 1, 3),
            "payment_status": "UNPAID",
        }
        fields.update(overrides)
        return Booking.model_validate(fields)

    return _make


@pytest.fixture
def make_hotel():
    from models import Hotel

    def _make(**overrides):
        fields = {"id": "H1", "name": "Harbour View", "stripe_price_id": "price_123"}
        fields.update(overrides)
        return Hotel.model_validate(fields)

    return _make


@pytest.fixture
def make_session():
    """Factory for real Stripe Checkout Session objects (attribute access, not dicts)."""

    def _make(**overrides):
        values = {
            "id": "cs_1",
            "object": "checkout.session",
            "client_secret": "cs_1_secret_abc",
            "status": "complete",
            "payment_status": "paid",
            "metadata": {"bookingId": "B1"},
            "customer_details": {"email": "guest@example.com"},
        }
        values.update(overrides)
        return stripe.checkout.Session.construct_from(values, "sk_test_123")

    return _make


def sign_payload(payload: bytes, secret: str = WEBHOOK_SECRET, timestamp: int = None) -> str:
    """Build a Stripe-Signature header the way Stripe does (HMAC-SHA256, v1 scheme)."""
    timestamp = timestamp or int(time.time())
    signed = f"{timestamp}.{payload.decode('utf-8')}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def event_payload(event_type: str, session_id: str = "cs_test_1") -> bytes:
    """Minimal Stripe event envelope around a Checkout Session object."""
    return json.dumps({
        "id": "evt_test_1",
        "object": "event",
        "type": event_type,
        "data": {"object": {"id": session_id, "object": "checkout.session"}},
    }).encode("utf-8")
