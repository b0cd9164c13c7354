"""Supabase client for Payment Service (bookings and hotels)."""

from datetime import datetime, timezone
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from supabase import create_client, Client

from config import settings
from models import Booking, Hotel, PaymentStatus
from packages.shared.errors import ConfigurationError

_client: Optional[Client] = None


def get_supabase() -> Optional[Client]:
    global _client
    if _client is not None:
        return _client
    if not settings.supabase_configured:
        return None
    _client = create_client(settings.supabase_url, settings.supabase_key)
    return _client


def _require_client() -> Client:
    client = get_supabase()
    if not client:
        raise ConfigurationError("Supabase not configured (SUPABASE_URL, SUPABASE_SECRET_KEY)")
    return client


def _find_by_id(table: str, row_id: str) -> Optional[dict]:
    client = _require_client()
    result = (
        client.table(table)
        .select("*")
        .eq("id", row_id)
        .limit(1)
        .execute()
    )
    return result.data[0] if result.data else None


async def check_connection() -> bool:
    """Verify database connectivity."""
    client = get_supabase()
    if not client:
        return False
    try:
        result = await run_in_threadpool(
            lambda: client.table("bookings").select("id").limit(1).execute()
        )
        return result.data is not None
    except Exception:
        return False


async def get_booking(booking_id: str) -> Optional[Booking]:
    """Find booking by id. Returns None if not found."""
    row = await run_in_threadpool(_find_by_id, "bookings", booking_id)
    return Booking.model_validate(row) if row else None


async def get_hotel(hotel_id: str) -> Optional[Hotel]:
    """Find hotel by id. Returns None if not found."""
    row = await run_in_threadpool(_find_by_id, "hotels", hotel_id)
    return Hotel.model_validate(row) if row else None


def _update_payment_status(booking_id: str) -> None:
    client = _require_client()
    client.table("bookings").update({
        "payment_status": PaymentStatus.PAID.value,
        "paid_at": datetime.now(timezone.utc).isoformat(),
    }).eq("id", booking_id).execute()


async def mark_booking_paid(booking_id: str) -> None:
    """Set payment_status to PAID and stamp paid_at. Idempotent on payment_status."""
    await run_in_threadpool(_update_payment_status, booking_id)
