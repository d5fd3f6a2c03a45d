"""Schemas for partner recommendation endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field

from drivya.schemas.organization import Organization


class MatchResult(Organization):
    """A recommended partner with its pairwise alignment."""

    alignment_score: int = Field(..., ge=0, le=100)
    match_reason: str


class MatchesResponse(BaseModel):
    organizations: list[MatchResult]
    total: int


class PairAlignmentResponse(BaseModel):
    org_a_id: str
    org_b_id: str
    score: int = Field(..., ge=0, le=100)
    reason: str


class ExcludeMatchResponse(BaseModel):
    success: bool
    message: str
