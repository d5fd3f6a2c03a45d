"""Drivya Match: FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from drivya.config import Settings, get_settings
from drivya.errors import RepositoryError, repository_error_handler
from drivya.middleware import configure_cors, configure_rate_limiting, configure_request_logging, lifespan
from drivya.routers import health, matches, metadata, organizations
from drivya.store import OrganizationRepository, build_repository


def create_app(
    settings: Settings | None = None,
    repository: OrganizationRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Partner discovery and alignment scoring for NGOs, funders and incubators",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Per-app state; routers read these through dependencies
    app.state.settings = settings
    app.state.repository = repository if repository is not None else build_repository(settings)

    # Middleware
    configure_request_logging(app)
    configure_cors(app, settings)
    configure_rate_limiting(app, settings)
    app.add_exception_handler(RepositoryError, repository_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(organizations.router, prefix=settings.api_prefix)
    app.include_router(matches.router, prefix=settings.api_prefix)
    app.include_router(metadata.router, prefix=settings.api_prefix)

    return app


# Default app instance for uvicorn
app = create_app()
