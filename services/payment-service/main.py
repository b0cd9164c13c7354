"""Payment Service - Stripe embedded checkout and webhooks for hotel bookings."""

import sys
from pathlib import Path

_root = Path(__file__).resolve().parents[2]
_svc = Path(__file__).resolve().parent
sys.path.insert(0, str(_root))
sys.path.insert(0, str(_svc))

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.checkout import router as checkout_router
from config import settings
from db import check_connection
from webhooks.stripe_webhook import router as stripe_webhook_router

from packages.shared.errors.middleware import (
    generic_exception_handler,
    request_id_middleware,
)
from packages.shared.monitoring.logging import configure_logging, get_logger
from packages.shared.monitoring.health import (
    DependencyCheck,
    DependencyStatus,
    HealthChecker,
    health_router,
)

SERVICE_NAME = "payment-service"
VERSION = "0.1.0"

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: configure logging, refuse to start with missing settings."""
    configure_logging(
        service_name=SERVICE_NAME,
        level=settings.log_level,
        json_format=settings.is_production,
    )
    settings.validate()
    logger.info("%s %s started (%s)", SERVICE_NAME, VERSION, settings.environment)
    yield


app = FastAPI(
    title="Payment Service",
    description="Stripe embedded checkout, webhooks and payment status for hotel bookings",
    version=VERSION,
    lifespan=lifespan,
)

origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(request_id_middleware)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(checkout_router)
app.include_router(stripe_webhook_router)

health_checker = HealthChecker(SERVICE_NAME, VERSION)


async def check_database() -> DependencyCheck:
    """Check database connectivity."""
    if not settings.supabase_configured:
        return DependencyCheck(
            name="database",
            status=DependencyStatus.UNHEALTHY,
            message="Supabase not configured",
        )
    ok = await check_connection()
    return DependencyCheck(
        name="database",
        status=DependencyStatus.HEALTHY if ok else DependencyStatus.UNHEALTHY,
        message="Connected" if ok else "Connection failed",
    )


async def check_stripe() -> DependencyCheck:
    """Stripe keys present; no network call."""
    if not settings.stripe_configured or not settings.stripe_webhook_secret:
        return DependencyCheck(
            name="stripe",
            status=DependencyStatus.UNHEALTHY,
            message="STRIPE_SECRET_KEY or STRIPE_WEBHOOK_SECRET not set",
        )
    return DependencyCheck(name="stripe", status=DependencyStatus.HEALTHY, message="Configured")


health_checker.add_check("database", check_database)
health_checker.add_check("stripe", check_stripe)
app.include_router(health_router(health_checker))


@app.get("/")
async def root():
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "endpoints": {
            "checkout_session": "POST /api/payments/checkout-session - Create embedded Checkout Session",
            "session_status": "GET /api/payments/session-status?session_id=... - Poll payment status",
            "stripe_webhook": "POST /api/stripe/webhook - Stripe webhook",
            "health": "GET /health",
            "ready": "GET /ready",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
