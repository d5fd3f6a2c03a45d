"""Partner recommendation API endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from drivya.schemas.match import ExcludeMatchResponse, MatchesResponse, PairAlignmentResponse
from drivya.services.alignment import calculate_alignment_score
from drivya.services.recommendations import recommend_partners
from drivya.store import OrganizationRepository, get_repository

logger = structlog.get_logger()

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("/recommendations", response_model=MatchesResponse)
async def get_recommendations(
    request: Request,
    org_id: str = Query(..., min_length=1),
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    repository: OrganizationRepository = Depends(get_repository),
) -> MatchesResponse:
    """Recommend partners for an organization, best alignment first."""
    source = repository.get(org_id)
    if source is None:
        raise HTTPException(status_code=404, detail=f"Organization '{org_id}' not found")

    settings = request.app.state.settings
    if limit is None:
        limit = settings.recommendation_default_limit
    limit = min(limit, settings.recommendation_max_limit)

    page, total = recommend_partners(
        source,
        repository.list(),
        limit=limit,
        offset=offset,
        excluded_ids=repository.excluded_ids(org_id),
    )
    return MatchesResponse(organizations=page, total=total)


@router.get("/{org_a_id}/{org_b_id}", response_model=PairAlignmentResponse)
async def get_pair_alignment(
    org_a_id: str,
    org_b_id: str,
    repository: OrganizationRepository = Depends(get_repository),
) -> PairAlignmentResponse:
    """Explain the alignment between two organizations."""
    org_a = repository.get(org_a_id)
    org_b = repository.get(org_b_id)
    missing = [oid for oid, org in ((org_a_id, org_a), (org_b_id, org_b)) if org is None]
    if missing:
        raise HTTPException(status_code=404, detail=f"Organization '{missing[0]}' not found")

    result = calculate_alignment_score(org_a, org_b)
    return PairAlignmentResponse(
        org_a_id=org_a_id,
        org_b_id=org_b_id,
        score=result.score,
        reason=result.reason,
    )


@router.post("/{org_a_id}/{org_b_id}/exclude", response_model=ExcludeMatchResponse)
async def exclude_match(
    org_a_id: str,
    org_b_id: str,
    repository: OrganizationRepository = Depends(get_repository),
) -> ExcludeMatchResponse:
    """Stop recommending one organization to another."""
    for oid in (org_a_id, org_b_id):
        if repository.get(oid) is None:
            raise HTTPException(status_code=404, detail=f"Organization '{oid}' not found")

    repository.exclude(org_a_id, org_b_id)
    logger.info("match_excluded", org_id=org_a_id, excluded_id=org_b_id)

    return ExcludeMatchResponse(
        success=True,
        message="Organization excluded from recommendations",
    )
