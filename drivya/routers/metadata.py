"""Directory metadata API endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from drivya.data.focus_areas import FOCUS_AREAS
from drivya.schemas.metadata import FocusAreaTaxonomyResponse

router = APIRouter(tags=["metadata"])


@router.get("/focus-areas", response_model=FocusAreaTaxonomyResponse)
async def get_focus_area_taxonomy() -> FocusAreaTaxonomyResponse:
    """The controlled list of focus areas organizations can choose from."""
    return FocusAreaTaxonomyResponse(focus_areas=FOCUS_AREAS, total=len(FOCUS_AREAS))
