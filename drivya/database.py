"""SQLAlchemy-backed organization repository."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy import create_engine, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from drivya.errors import RepositoryError
from drivya.models import Base, MatchExclusionRow, OrganizationRow
from drivya.schemas.organization import Organization
from drivya.store import Predicate

logger = structlog.get_logger()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create the engine for ``database_url``, ensure tables exist, return a session factory."""
    kwargs: dict = {"future": True, "pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **kwargs)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)


def _row_to_organization(row: OrganizationRow) -> Organization:
    return Organization.model_validate({
        "id": row.id,
        "name": row.name,
        "type": row.type,
        "website": row.website,
        "headquarters": row.headquarters,
        "region": row.region,
        "focus_areas": row.focus_areas,
        "mission": row.mission,
        "description": row.description,
        "verification_status": row.verification_status,
        "projects": row.projects,
        "funding_type": row.funding_type,
        "target_beneficiaries": row.target_beneficiaries,
        "partner_history": row.partner_history,
        "confidence": row.confidence,
    })


def _apply_organization(row: OrganizationRow, org: Organization) -> None:
    data = org.model_dump(mode="json", exclude={"id"})
    for key, value in data.items():
        setattr(row, key, value)


class SqlOrganizationRepository:
    """Repository storing organizations in a relational database."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("repository_error", operation=operation, error=str(exc))
            raise RepositoryError(f"{operation} failed") from exc
        finally:
            session.close()

    def get(self, org_id: str) -> Organization | None:
        with self._session("get") as session:
            row = session.get(OrganizationRow, org_id)
            return _row_to_organization(row) if row is not None else None

    def list(self, predicate: Predicate | None = None) -> list[Organization]:
        with self._session("list") as session:
            rows = session.scalars(select(OrganizationRow).order_by(OrganizationRow.position)).all()
            orgs = [_row_to_organization(row) for row in rows]
        if predicate is None:
            return orgs
        return [org for org in orgs if predicate(org)]

    def upsert(self, org: Organization) -> Organization:
        with self._session("upsert") as session:
            row = session.get(OrganizationRow, org.id)
            if row is None:
                last = session.scalar(select(func.max(OrganizationRow.position)))
                row = OrganizationRow(id=org.id, position=(last or 0) + 1)
                session.add(row)
            _apply_organization(row, org)
        return org

    def count(self) -> int:
        with self._session("count") as session:
            return session.scalar(select(func.count()).select_from(OrganizationRow)) or 0

    def exclude(self, org_id: str, excluded_id: str) -> None:
        """Record an exclusion. Repeating one, even concurrently, is a no-op."""
        with self._session("exclude") as session:
            existing = session.scalar(
                select(MatchExclusionRow.id).where(
                    MatchExclusionRow.org_id == org_id,
                    MatchExclusionRow.excluded_id == excluded_id,
                )
            )
            if existing is not None:
                return
            session.add(MatchExclusionRow(org_id=org_id, excluded_id=excluded_id))
            try:
                session.flush()
            except IntegrityError:
                # recorded by a concurrent request after the lookup above
                session.rollback()
                logger.info("match_exclusion_exists", org_id=org_id, excluded_id=excluded_id)

    def excluded_ids(self, org_id: str) -> set[str]:
        with self._session("excluded_ids") as session:
            rows = session.scalars(
                select(MatchExclusionRow.excluded_id).where(MatchExclusionRow.org_id == org_id)
            ).all()
            return set(rows)
