"""Exceptions shared across the Drivya Match service."""

from __future__ import annotations

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger()


class RepositoryError(Exception):
    """Raised when the organization repository cannot complete an operation."""


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Translate storage failures into a 503 response."""
    logger.error("directory_unavailable", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=503,
        content={"detail": "Organization directory is temporarily unavailable"},
    )
