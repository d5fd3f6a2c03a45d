"""Filter & Ranking Pipeline for the organization directory."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from drivya.schemas.organization import Organization, OrganizationWithScore
from drivya.schemas.search import SearchFilters, SortBy
from drivya.services.alignment import ScoringContext, calculate_context_alignment_score


class Facets(BaseModel):
    model_config = ConfigDict(frozen=True)

    focus_areas: list[str] = Field(default_factory=list)
    regions: list[str] = Field(default_factory=list)


class SearchOutcome(BaseModel):
    """Filtered, scored results with facets of the full corpus."""

    model_config = ConfigDict(frozen=True)

    results: list[OrganizationWithScore]
    total: int
    facets: Facets


def matches_query(org: Organization, query: str) -> bool:
    """Case-insensitive substring match on name, mission, description or any focus area."""
    needle = query.strip().casefold()
    if not needle:
        return True
    fields = [org.name, org.mission, org.description, *org.focus_areas]
    return any(needle in text.casefold() for text in fields)


def matches_filters(org: Organization, filters: SearchFilters) -> bool:
    """Return True if ``org`` satisfies the query and every declared filter."""
    if not matches_query(org, filters.q):
        return False

    if filters.focus_area:
        wanted = filters.focus_area.casefold()
        if not any(area.casefold() == wanted for area in org.focus_areas):
            return False

    if filters.region:
        if filters.region.casefold() not in org.region.casefold():
            return False

    if filters.funding_type is not None and org.funding_type != filters.funding_type:
        return False

    if filters.verification_status is not None and org.verification_status != filters.verification_status:
        return False

    return True


def collect_facets(organizations: Iterable[Organization]) -> Facets:
    """Sorted distinct focus areas and non-empty regions."""
    focus_areas: set[str] = set()
    regions: set[str] = set()
    for org in organizations:
        focus_areas.update(org.focus_areas)
        if org.region:
            regions.add(org.region)
    return Facets(focus_areas=sorted(focus_areas), regions=sorted(regions))


def score_organizations(
    organizations: Iterable[Organization],
    context: ScoringContext | None = None,
) -> list[OrganizationWithScore]:
    """Annotate each organization with its contextual alignment score."""
    return [
        OrganizationWithScore.model_validate(
            {**org.model_dump(), "alignment_score": calculate_context_alignment_score(org, context)}
        )
        for org in organizations
    ]


def sort_results(results: list[OrganizationWithScore], sort_by: SortBy) -> list[OrganizationWithScore]:
    """Order scored results. Every ordering is stable; recency keeps insertion order."""
    if sort_by is SortBy.NAME:
        return sorted(results, key=lambda r: r.name)
    if sort_by is SortBy.CONFIDENCE:
        return sorted(results, key=lambda r: r.confidence, reverse=True)
    if sort_by is SortBy.RECENCY:
        return list(results)
    return sorted(results, key=lambda r: r.alignment_score, reverse=True)


def search_organizations(
    organizations: Iterable[Organization],
    filters: SearchFilters | None = None,
) -> SearchOutcome:
    """Filter, score and sort the directory.

    Facets always describe the full collection passed in, not the filtered
    subset, so filter menus stay populated when a search returns nothing.
    """
    if filters is None:
        filters = SearchFilters()

    corpus = list(organizations)
    survivors = [org for org in corpus if matches_filters(org, filters)]

    scored = score_organizations(survivors, ScoringContext.from_filters(filters))
    ordered = sort_results(scored, filters.sort_by)

    return SearchOutcome(
        results=ordered,
        total=len(ordered),
        facets=collect_facets(corpus),
    )
