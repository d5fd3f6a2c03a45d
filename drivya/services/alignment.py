"""Alignment Scoring Engine: heuristic partner compatibility scores.

Two variants share this module:

* pairwise (``calculate_alignment_score``) compares two organizations and
  explains the result;
* contextual (``calculate_context_alignment_score``) scores one organization
  against active search filters or user preferences, and falls back to the
  query-independent baseline (``calculate_base_alignment_score``) when no
  context is active, so an organization shows the same score everywhere it
  appears without a search.

The pairwise variant applies confidence as a flat penalty and the contextual
variant as a multiplicative factor. All functions are pure.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from drivya.schemas.organization import (
    FundingType,
    Organization,
    OrganizationType,
    coerce_organization,
)


PAIRWISE_BASE_SCORE = 40
CONTEXT_BASE_SCORE = 50

REGION_MATCH_BONUS = 15
TYPE_COMPATIBILITY_BONUS = 5
VERIFIED_BONUS_PER_ORG = 5
VERIFICATION_BONUS_CAP = 10
LOW_CONFIDENCE_THRESHOLD = 70
LOW_CONFIDENCE_PENALTY = 5

# Type pairs that tend to partner well; looked up as unordered pairs
COMPATIBLE_TYPE_PAIRS = frozenset(
    frozenset(pair)
    for pair in [
        (OrganizationType.NGO, OrganizationType.FOUNDATION),
        (OrganizationType.NGO, OrganizationType.CSR),
        (OrganizationType.NGO, OrganizationType.INCUBATOR),
        (OrganizationType.SOCIAL_ENTERPRISE, OrganizationType.INCUBATOR),
        (OrganizationType.SOCIAL_ENTERPRISE, OrganizationType.FOUNDATION),
    ]
)

FALLBACK_REASON = "Complementary missions"


class AlignmentResult(BaseModel):
    """Score and explanation for one pairwise comparison."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    reason: str


class ScoringContext(BaseModel):
    """Filter or preference values an organization is scored against."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    focus_areas: frozenset[str] = frozenset()
    region: str = ""
    funding_type: FundingType | None = None

    @field_validator("focus_areas", mode="before")
    @classmethod
    def _drop_blank_labels(cls, value: Any) -> frozenset[str]:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return frozenset(label.strip() for label in value if isinstance(label, str) and label.strip())

    @property
    def is_active(self) -> bool:
        return bool(self.focus_areas or self.region.strip() or self.funding_type)

    @classmethod
    def from_filters(cls, filters: Any) -> ScoringContext:
        """Build the scoring context implied by a set of search filters."""
        focus_area = (getattr(filters, "focus_area", None) or "").strip()
        return cls(
            focus_areas=frozenset([focus_area]) if focus_area else frozenset(),
            region=(getattr(filters, "region", None) or "").strip(),
            funding_type=getattr(filters, "funding_type", None),
        )


OrganizationLike = Organization | Mapping[str, Any]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return int(min(100, max(0, value)))


def focus_overlap_bonus(overlap: int) -> int:
    """Banded bonus for the number of shared focus areas."""
    if overlap <= 0:
        return 0
    if overlap == 1:
        return 10
    if overlap <= 3:
        return 20
    return 30


def count_focus_overlap(first: Iterable[str], second: Iterable[str]) -> int:
    """Number of distinct focus areas present in both collections (case-sensitive)."""
    return len(set(first) & set(second))


def types_compatible(first: OrganizationType | None, second: OrganizationType | None) -> bool:
    if first is None or second is None:
        return False
    return frozenset((first, second)) in COMPATIBLE_TYPE_PAIRS


def calculate_alignment_score(org_a: OrganizationLike, org_b: OrganizationLike) -> AlignmentResult:
    """Score how well two organizations align as potential partners.

    Base 40, plus a banded focus-overlap bonus, +15 for the same region,
    +5 for a compatible type pair and +5 per verified organization (capped
    at +10), minus 5 when either confidence is below 70. The result is
    clamped to [0, 100].
    """
    org_a = coerce_organization(org_a)
    org_b = coerce_organization(org_b)

    score = PAIRWISE_BASE_SCORE

    overlap = count_focus_overlap(org_a.focus_areas, org_b.focus_areas)
    score += focus_overlap_bonus(overlap)

    same_region = bool(org_a.region) and org_a.region == org_b.region
    if same_region:
        score += REGION_MATCH_BONUS

    if types_compatible(org_a.type, org_b.type):
        score += TYPE_COMPATIBILITY_BONUS

    verified = int(org_a.is_verified) + int(org_b.is_verified)
    score += min(verified * VERIFIED_BONUS_PER_ORG, VERIFICATION_BONUS_CAP)

    if min(org_a.confidence, org_b.confidence) < LOW_CONFIDENCE_THRESHOLD:
        score = max(score - LOW_CONFIDENCE_PENALTY, 0)

    reasons = []
    if overlap > 0:
        reasons.append(f"{overlap} focus area match")
    if same_region:
        reasons.append("Same region")
    if org_a.is_verified and org_b.is_verified:
        reasons.append("Both verified")

    return AlignmentResult(
        score=clamp_score(score),
        reason=", ".join(reasons) if reasons else FALLBACK_REASON,
    )


def calculate_base_alignment_score(org: OrganizationLike) -> int:
    """Query-independent score reflecting the richness of an organization's record."""
    org = coerce_organization(org)

    score = CONTEXT_BASE_SCORE
    score += min(20, len(org.focus_areas) * 5)
    if org.region:
        score += 10
    if org.is_verified:
        score += 10
    score += round_half_up(10 * org.confidence / 100)

    return clamp_score(score)


def calculate_context_alignment_score(
    org: OrganizationLike,
    context: ScoringContext | None = None,
) -> int:
    """Score an organization against search filters or user preferences.

    Without an active context this is the baseline score. Otherwise focus,
    region, funding type and verification bonuses are summed from 50 and
    scaled by ``0.7 + 0.3 * confidence / 100``, so low-confidence records are
    demoted but never zeroed.
    """
    org = coerce_organization(org)
    if context is None or not context.is_active:
        return calculate_base_alignment_score(org)

    score = CONTEXT_BASE_SCORE

    if context.focus_areas:
        wanted = {area.casefold() for area in context.focus_areas}
        if any(area.casefold() in wanted for area in org.focus_areas):
            score += 20
    else:
        score += min(15, len(org.focus_areas) * 4)

    region = context.region.strip()
    if region:
        if org.region and region.casefold() in org.region.casefold():
            score += 15
    elif org.region:
        score += 8

    if context.funding_type is not None and org.funding_type == context.funding_type:
        score += 10

    if org.is_verified:
        score += 5

    score = round_half_up(score * (0.7 + 0.3 * org.confidence / 100))
    return clamp_score(score)
