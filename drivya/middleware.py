"""Application middleware: rate limiting, CORS, request logging, shutdown."""

from __future__ import annotations

import logging
import signal
import threading
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from drivya.config import Settings

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def get_limiter(settings: Settings) -> Limiter:
    """Per-client limiter applying ``rate_limit_default`` to every route."""
    return Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])


def configure_cors(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "X-RateLimit-Remaining"],
    )


def configure_rate_limiting(app: FastAPI, settings: Settings) -> None:
    app.state.limiter = get_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)


async def logging_middleware(request: Request, call_next) -> Response:
    """Tag the request with an id, then log its method, path, status and duration.

    A caller-supplied ``X-Request-ID`` is reused so log lines can be joined
    with the caller's own. The id is bound into structlog's context for every
    line logged while the request is handled and echoed on the response.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)

    started = time.monotonic()
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id

    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.monotonic() - started) * 1000, 2),
        client_ip=request.client.host if request.client else "unknown",
    )
    return response


def configure_request_logging(app: FastAPI) -> None:
    app.middleware("http")(logging_middleware)


def configure_structured_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging at ``log_level``, rendered as JSON or console text."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


_shutdown_requested = False


def is_shutdown_requested() -> bool:
    return _shutdown_requested


def _request_shutdown(signum, frame) -> None:
    global _shutdown_requested
    _shutdown_requested = True
    logger.info("shutdown_signal_received", signal=signum)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging, report the directory that is being served, flag shutdown on exit."""
    global _shutdown_requested

    settings = app.state.settings
    configure_structured_logging(settings)

    logger.info(
        "application_starting",
        version=settings.app_version,
        environment=settings.environment,
        storage_backend=settings.storage_backend,
        organizations=app.state.repository.count(),
    )

    # signal handlers can only be installed from the main thread
    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, _request_shutdown)
        signal.signal(signal.SIGINT, _request_shutdown)

    yield

    _shutdown_requested = True
    logger.info("application_shutting_down", storage_backend=settings.storage_backend)
