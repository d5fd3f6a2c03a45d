"""Schemas for health probes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ServiceHealth(BaseModel):
    """Result of probing one dependency (the app itself, the directory)."""

    service: str
    status: Literal["healthy", "unhealthy"]
    latency_ms: float | None = None
    details: str | None = None


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    environment: str
    services: list[ServiceHealth]
