"""Health probes: liveness, basic health and directory readiness."""

from __future__ import annotations

import time

import structlog
from fastapi import APIRouter, Request

from drivya.errors import RepositoryError
from drivya.schemas.health import HealthResponse, ServiceHealth

logger = structlog.get_logger()

router = APIRouter(tags=["health"])


def _elapsed_ms(start: float) -> float:
    return round((time.monotonic() - start) * 1000, 2)


def _probe_directory(request: Request) -> ServiceHealth:
    """Count the directory through the configured repository."""
    backend = request.app.state.settings.storage_backend
    start = time.monotonic()
    try:
        total = request.app.state.repository.count()
    except RepositoryError as exc:
        logger.warning("readiness_probe_failed", backend=backend, error=str(exc))
        return ServiceHealth(
            service="directory",
            status="unhealthy",
            latency_ms=_elapsed_ms(start),
            details=f"{backend}: {exc}"[:200],
        )
    return ServiceHealth(
        service="directory",
        status="healthy",
        latency_ms=_elapsed_ms(start),
        details=f"{backend}: {total} organization(s)",
    )


def _report(request: Request, services: list[ServiceHealth], degraded: str) -> HealthResponse:
    settings = request.app.state.settings
    return HealthResponse(
        status="healthy" if all(s.status == "healthy" for s in services) else degraded,
        version=settings.app_version,
        environment=settings.environment,
        services=services,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Is the application serving requests?"""
    return _report(request, [ServiceHealth(service="app", status="healthy")], degraded="degraded")


@router.get("/health/ready", response_model=HealthResponse)
async def readiness_check(request: Request) -> HealthResponse:
    """Can the organization directory be read?"""
    services = [
        ServiceHealth(service="app", status="healthy"),
        _probe_directory(request),
    ]
    return _report(request, services, degraded="unhealthy")


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    return {"status": "alive"}
