"""Tests for the directory filter and ranking pipeline."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from drivya.data.organizations import SEED_ORGANIZATIONS
from drivya.schemas.search import SearchFilters, SortBy
from drivya.services.alignment import calculate_base_alignment_score
from drivya.services.search import (
    collect_facets,
    matches_query,
    score_organizations,
    search_organizations,
    sort_results,
)

ALL_FOCUS_AREAS = ["Education", "Environment", "Governance", "Health", "Livelihood", "Technology"]
ALL_REGIONS = ["Eastern India", "Northern India", "Southern India", "Western India"]


def _ids(outcome) -> list[str]:
    return [r.id for r in outcome.results]


# ─── Facets ──────────────────────────────────────────────────────────────────

class TestFacets:
    """Facets always describe the whole directory."""

    def test_facets_sorted_and_distinct(self):
        facets = collect_facets(SEED_ORGANIZATIONS)
        assert facets.focus_areas == ALL_FOCUS_AREAS
        assert facets.regions == ALL_REGIONS

    def test_empty_regions_skipped(self, make_org):
        facets = collect_facets([make_org("a", region=""), make_org("b", region="Delhi")])
        assert facets.regions == ["Delhi"]

    def test_zero_result_filter_keeps_facets(self):
        """A focus area nobody has returns nothing but full facets."""
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(focus_area="Agriculture"))
        assert outcome.results == []
        assert outcome.total == 0
        assert outcome.facets.focus_areas == ALL_FOCUS_AREAS
        assert outcome.facets.regions == ALL_REGIONS

    def test_empty_directory(self):
        outcome = search_organizations([])
        assert outcome.total == 0
        assert outcome.facets.focus_areas == []
        assert outcome.facets.regions == []


# ─── Filtering ───────────────────────────────────────────────────────────────

class TestFiltering:
    """Tests for query and filter matching."""

    def test_no_filters_returns_everything(self):
        outcome = search_organizations(SEED_ORGANIZATIONS)
        assert outcome.total == len(SEED_ORGANIZATIONS)

    def test_free_text_is_case_insensitive(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(q="WATER"))
        assert _ids(outcome) == ["org-009"]

    def test_free_text_searches_mission(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(q="innovation", sort_by=SortBy.RECENCY))
        assert _ids(outcome) == ["org-005", "org-010"]

    def test_free_text_searches_focus_areas(self, make_org):
        org = make_org("a", name="Alpha", focus_areas=["Disability"])
        assert matches_query(org, "disab")
        assert not matches_query(org, "farming")

    def test_free_text_ignores_region(self, make_org):
        org = make_org("a", name="Alpha", region="Kerala")
        assert not matches_query(org, "kerala")

    def test_blank_query_matches(self, make_org):
        assert matches_query(make_org("a"), "   ")

    def test_focus_area_filter(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(focus_area="Technology"))
        assert sorted(_ids(outcome)) == ["org-004", "org-005", "org-010"]

    def test_focus_area_filter_is_whole_label(self):
        """A partial label does not match."""
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(focus_area="Tech"))
        assert outcome.total == 0

    def test_region_filter_is_substring(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(region="southern"))
        assert sorted(_ids(outcome)) == ["org-003", "org-004", "org-006", "org-008", "org-010"]

    def test_funding_type_filter(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(funding_type="provider"))
        assert sorted(_ids(outcome)) == ["org-005", "org-008", "org-010"]

    def test_verification_filter(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(verification_status="pending"))
        assert _ids(outcome) == ["org-010"]

    def test_filters_are_combined(self):
        """Every filter must hold at once."""
        outcome = search_organizations(
            SEED_ORGANIZATIONS,
            SearchFilters(focus_area="Technology", region="Southern", funding_type="provider"),
        )
        assert _ids(outcome) == ["org-010"]

    def test_query_and_filter_combined(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(q="innovation", region="Southern"))
        assert _ids(outcome) == ["org-010"]


# ─── Scoring and sorting ─────────────────────────────────────────────────────

class TestRanking:
    """Tests for scoring and ordering results."""

    def test_unfiltered_results_use_baseline(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(q="water"))
        org = outcome.results[0]
        assert org.alignment_score == calculate_base_alignment_score(org)

    def test_default_sort_is_alignment_descending(self):
        scores = [r.alignment_score for r in search_organizations(SEED_ORGANIZATIONS).results]
        assert scores == sorted(scores, reverse=True)

    def test_sort_by_name(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(sort_by=SortBy.NAME))
        names = [r.name for r in outcome.results]
        assert all(a <= b for a, b in zip(names, names[1:]))

    def test_sort_by_recency_keeps_directory_order(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(sort_by=SortBy.RECENCY))
        assert _ids(outcome) == [org.id for org in SEED_ORGANIZATIONS]

    def test_sort_by_confidence(self):
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(sort_by=SortBy.CONFIDENCE))
        confidences = [r.confidence for r in outcome.results]
        assert confidences == sorted(confidences, reverse=True)
        assert outcome.results[0].id == "org-001"

    def test_sorting_is_stable(self, make_org):
        """Equal scores keep their directory order."""
        orgs = [make_org(f"org-{i}", confidence=80) for i in range(5)]
        scored = score_organizations(orgs)
        ordered = sort_results(scored, SortBy.ALIGNMENT)
        assert [r.id for r in ordered] == [o.id for o in orgs]

    def test_filters_drive_contextual_scores(self):
        """With an active filter, matching organizations score above their baseline."""
        outcome = search_organizations(SEED_ORGANIZATIONS, SearchFilters(focus_area="Health", region="Eastern"))
        assert _ids(outcome) == ["org-009"]
        # (50 + 20 + 15 + 5) * (0.7 + 0.3 * 0.89)
        assert outcome.results[0].alignment_score == 87

    def test_search_does_not_mutate_input(self):
        corpus = list(SEED_ORGANIZATIONS)
        search_organizations(corpus, SearchFilters(sort_by=SortBy.NAME))
        assert corpus == SEED_ORGANIZATIONS

    def test_outcome_is_immutable(self):
        """Search outcomes and facets cannot be modified after the search."""
        outcome = search_organizations(SEED_ORGANIZATIONS)
        with pytest.raises(ValidationError):
            outcome.total = 0
        with pytest.raises(ValidationError):
            outcome.facets.regions = []
        assert outcome.model_dump()["facets"]["regions"] == ALL_REGIONS
