"""Schemas for directory search endpoints."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from drivya.schemas.organization import FundingType, OrganizationWithScore, VerificationStatus


class SortBy(str, Enum):
    ALIGNMENT = "alignment"
    NAME = "name"
    RECENCY = "recency"
    CONFIDENCE = "confidence"


class SearchFilters(BaseModel):
    """Every filter the search pipeline recognises. Unknown keys are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    q: str = ""
    focus_area: str = ""
    region: str = ""
    funding_type: FundingType | None = None
    verification_status: VerificationStatus | None = None
    sort_by: SortBy = SortBy.ALIGNMENT

    @field_validator("q", "focus_area", "region", mode="before")
    @classmethod
    def _strip(cls, value: str | None) -> str:
        return (value or "").strip()


class SearchResponse(BaseModel):
    """Filtered, scored results plus facets of the whole directory."""

    success: bool = True
    results: list[OrganizationWithScore]
    total: int
    focus_areas: list[str] = Field(default_factory=list)
    regions: list[str] = Field(default_factory=list)


class FocusAreaFacets(BaseModel):
    focus_areas: list[str]


class RegionFacets(BaseModel):
    regions: list[str]
