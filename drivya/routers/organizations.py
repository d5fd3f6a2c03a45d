"""Organization directory API endpoints."""

from __future__ import annotations

import uuid

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from drivya.schemas.organization import (
    Organization,
    OrganizationListResponse,
    OrganizationSubmission,
    OrganizationWithScore,
    VerificationStatus,
    VerificationUpdate,
)
from drivya.schemas.search import FocusAreaFacets, RegionFacets, SearchFilters, SearchResponse
from drivya.services.search import collect_facets, score_organizations, search_organizations
from drivya.store import OrganizationRepository, get_repository

logger = structlog.get_logger()

router = APIRouter(prefix="/orgs", tags=["organizations"])


def _with_baseline(org: Organization) -> OrganizationWithScore:
    return score_organizations([org])[0]


def _get_or_404(repository: OrganizationRepository, org_id: str) -> Organization:
    org = repository.get(org_id)
    if org is None:
        raise HTTPException(status_code=404, detail=f"Organization '{org_id}' not found")
    return org


@router.get("", response_model=OrganizationListResponse)
async def list_organizations(
    repository: OrganizationRepository = Depends(get_repository),
) -> OrganizationListResponse:
    """List every organization with its baseline alignment score."""
    organizations = score_organizations(repository.list())
    return OrganizationListResponse(organizations=organizations, total=len(organizations))


@router.get("/search", response_model=SearchResponse)
async def search(
    repository: OrganizationRepository = Depends(get_repository),
    q: str = Query(default=""),
    focus_area: str = Query(default="", alias="focusArea"),
    region: str = Query(default=""),
    funding_type: str = Query(default="", alias="fundingType"),
    verification_status: str = Query(default="", alias="verificationStatus"),
    sort_by: str = Query(default="", alias="sortBy"),
) -> SearchResponse:
    """Search, filter and rank the directory."""
    try:
        filters = SearchFilters(
            q=q,
            focus_area=focus_area,
            region=region,
            funding_type=funding_type.strip() or None,
            verification_status=verification_status.strip() or None,
            sort_by=sort_by.strip() or "alignment",
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc

    outcome = search_organizations(repository.list(), filters)

    logger.info(
        "search_executed",
        query=filters.q,
        focus_area=filters.focus_area,
        region=filters.region,
        sort_by=filters.sort_by.value,
        total=outcome.total,
    )

    return SearchResponse(
        success=True,
        results=outcome.results,
        total=outcome.total,
        focus_areas=outcome.facets.focus_areas,
        regions=outcome.facets.regions,
    )


@router.get("/filters/focus-areas", response_model=FocusAreaFacets)
async def get_focus_area_facets(
    repository: OrganizationRepository = Depends(get_repository),
) -> FocusAreaFacets:
    """Distinct focus areas used across the directory."""
    return FocusAreaFacets(focus_areas=collect_facets(repository.list()).focus_areas)


@router.get("/filters/regions", response_model=RegionFacets)
async def get_region_facets(
    repository: OrganizationRepository = Depends(get_repository),
) -> RegionFacets:
    """Distinct regions used across the directory."""
    return RegionFacets(regions=collect_facets(repository.list()).regions)


@router.post("", response_model=OrganizationWithScore, status_code=201)
async def submit_organization(
    submission: OrganizationSubmission,
    request: Request,
    repository: OrganizationRepository = Depends(get_repository),
) -> OrganizationWithScore:
    """Register a new organization. It stays pending until verified."""
    settings = request.app.state.settings
    org = submission.to_record(
        org_id=f"org-{uuid.uuid4().hex[:12]}",
        verification_status=VerificationStatus.PENDING,
        confidence=settings.submission_confidence,
    )
    repository.upsert(org)

    logger.info("organization_submitted", org_id=org.id, org_type=org.type.value if org.type else None)
    return _with_baseline(org)


@router.get("/{org_id}", response_model=OrganizationWithScore)
async def get_organization(
    org_id: str,
    repository: OrganizationRepository = Depends(get_repository),
) -> OrganizationWithScore:
    """Get one organization with its baseline alignment score."""
    return _with_baseline(_get_or_404(repository, org_id))


@router.put("/{org_id}", response_model=OrganizationWithScore)
async def update_organization(
    org_id: str,
    submission: OrganizationSubmission,
    repository: OrganizationRepository = Depends(get_repository),
) -> OrganizationWithScore:
    """Replace an organization's profile, keeping its verification state."""
    existing = _get_or_404(repository, org_id)
    org = submission.to_record(
        org_id=org_id,
        verification_status=existing.verification_status,
        confidence=existing.confidence,
    )
    repository.upsert(org)

    logger.info("organization_updated", org_id=org_id)
    return _with_baseline(org)


@router.put("/{org_id}/verification", response_model=OrganizationWithScore)
async def update_verification(
    org_id: str,
    update: VerificationUpdate,
    repository: OrganizationRepository = Depends(get_repository),
) -> OrganizationWithScore:
    """Set an organization's verification status and, optionally, its confidence."""
    existing = _get_or_404(repository, org_id)
    changes: dict = {"verification_status": update.verification_status}
    if update.confidence is not None:
        changes["confidence"] = update.confidence
    org = existing.model_copy(update=changes)
    repository.upsert(org)

    logger.info(
        "organization_verification_changed",
        org_id=org_id,
        verification_status=org.verification_status.value,
        confidence=org.confidence,
    )
    return _with_baseline(org)
