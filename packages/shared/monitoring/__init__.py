"""Monitoring and observability utilities."""

from .health import HealthChecker, DependencyCheck, DependencyStatus, health_router
from .logging import configure_logging, get_logger, log_with_context

__all__ = [
    "HealthChecker",
    "DependencyCheck",
    "DependencyStatus",
    "health_router",
    "configure_logging",
    "get_logger",
    "log_with_context",
]
