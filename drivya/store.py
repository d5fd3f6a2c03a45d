"""Organization repository for Drivya Match.

The directory is reached only through ``OrganizationRepository``. Each
application instance builds its own repository in ``create_app`` and routers
receive it as a dependency, so tests get a fresh directory per app.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol

from fastapi import Request

from drivya.config import Settings
from drivya.schemas.organization import Organization

Predicate = Callable[[Organization], bool]


class OrganizationRepository(Protocol):
    """Read/write access to organization records and match exclusions."""

    def get(self, org_id: str) -> Organization | None: ...

    def list(self, predicate: Predicate | None = None) -> list[Organization]: ...

    def upsert(self, org: Organization) -> Organization: ...

    def count(self) -> int: ...

    def exclude(self, org_id: str, excluded_id: str) -> None: ...

    def excluded_ids(self, org_id: str) -> set[str]: ...


class InMemoryOrganizationRepository:
    """Process-local repository used in development and testing.

    Records keep insertion order, which is the order ``recency`` sorting
    returns.
    """

    def __init__(self, organizations: Iterable[Organization] = ()) -> None:
        self._organizations: dict[str, Organization] = {}
        self._exclusions: dict[str, set[str]] = {}
        for org in organizations:
            self.upsert(org)

    def get(self, org_id: str) -> Organization | None:
        return self._organizations.get(org_id)

    def list(self, predicate: Predicate | None = None) -> list[Organization]:
        orgs = list(self._organizations.values())
        if predicate is None:
            return orgs
        return [org for org in orgs if predicate(org)]

    def upsert(self, org: Organization) -> Organization:
        """Add or replace an organization. Replacing keeps its original position."""
        self._organizations[org.id] = org
        return org

    def count(self) -> int:
        return len(self._organizations)

    def exclude(self, org_id: str, excluded_id: str) -> None:
        self._exclusions.setdefault(org_id, set()).add(excluded_id)

    def excluded_ids(self, org_id: str) -> set[str]:
        return set(self._exclusions.get(org_id, set()))


def build_repository(settings: Settings) -> OrganizationRepository:
    """Create the repository selected by ``settings.storage_backend``."""
    if settings.storage_backend == "database":
        from drivya.database import SqlOrganizationRepository, create_session_factory

        repository: OrganizationRepository = SqlOrganizationRepository(
            create_session_factory(settings.database_url)
        )
    else:
        repository = InMemoryOrganizationRepository()

    if settings.seed_demo_data and repository.count() == 0:
        from drivya.data.organizations import SEED_ORGANIZATIONS

        for org in SEED_ORGANIZATIONS:
            repository.upsert(org)

    return repository


def get_repository(request: Request) -> OrganizationRepository:
    """FastAPI dependency returning the app's repository."""
    return request.app.state.repository
