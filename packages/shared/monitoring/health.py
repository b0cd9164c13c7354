"""Health check endpoints: liveness and dependency readiness."""

from enum import Enum
from typing import Awaitable, Callable, List, Optional, Tuple

from fastapi import APIRouter
from pydantic import BaseModel


class DependencyStatus(str, Enum):
    """Status of a dependency check."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


class DependencyCheck(BaseModel):
    """Result of a single dependency check."""

    name: str
    status: DependencyStatus
    message: Optional[str] = None


class HealthChecker:
    """Runs registered dependency checks for the readiness probe."""

    def __init__(self, service_name: str, version: str = "0.1.0"):
        self.service_name = service_name
        self.version = version
        self._checks: List[Tuple[str, Callable[[], Awaitable[DependencyCheck]]]] = []

    def add_check(self, name: str, check: Callable[[], Awaitable[DependencyCheck]]):
        self._checks.append((name, check))

    async def check_dependencies(self) -> List[DependencyCheck]:
        results = []
        for name, check_fn in self._checks:
            try:
                results.append(await check_fn())
            except Exception as e:
                results.append(
                    DependencyCheck(
                        name=name,
                        status=DependencyStatus.UNHEALTHY,
                        message=str(e),
                    )
                )
        return results

    async def readiness(self) -> dict:
        """Overall status is the worst status among the dependencies."""
        dependencies = await self.check_dependencies()
        statuses = [d.status for d in dependencies]
        if DependencyStatus.UNHEALTHY in statuses:
            overall = DependencyStatus.UNHEALTHY
        elif DependencyStatus.DEGRADED in statuses:
            overall = DependencyStatus.DEGRADED
        else:
            overall = DependencyStatus.HEALTHY

        return {
            "status": overall.value,
            "service": self.service_name,
            "version": self.version,
            "dependencies": [d.model_dump(mode="json") for d in dependencies],
        }


def health_router(health_checker: HealthChecker) -> APIRouter:
    """Create FastAPI router with /health and /ready endpoints."""
    router = APIRouter(tags=["Health"])

    @router.get("/health")
    async def health():
        """Liveness probe."""
        return {
            "status": DependencyStatus.HEALTHY.value,
            "service": health_checker.service_name,
            "version": health_checker.version,
        }

    @router.get("/ready")
    async def ready():
        """Readiness probe - database and Stripe configuration."""
        return await health_checker.readiness()

    return router
