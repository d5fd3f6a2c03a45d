"""Organization tables: directory records and match exclusions."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from drivya.models.base import Base, TimestampMixin


class OrganizationRow(TimestampMixin, Base):
    """A stored organization record."""

    __tablename__ = "organizations"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    # insertion order, used for "recency" listing
    position: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    website: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    headquarters: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    region: Mapped[str] = mapped_column(String(255), nullable=False, default="", index=True)
    focus_areas: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    mission: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    verification_status: Mapped[str] = mapped_column(String(20), nullable=False, default="unverified")
    projects: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    funding_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    target_beneficiaries: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    partner_history: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    confidence: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<OrganizationRow {self.id}>"


class MatchExclusionRow(TimestampMixin, Base):
    """An organization that must not be recommended to another."""

    __tablename__ = "match_exclusions"
    __table_args__ = (UniqueConstraint("org_id", "excluded_id", name="uq_match_exclusion"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    org_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    excluded_id: Mapped[str] = mapped_column(String(64), nullable=False)

    def __repr__(self) -> str:
        return f"<MatchExclusionRow {self.org_id} -x- {self.excluded_id}>"
