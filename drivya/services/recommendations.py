"""Partner recommendations built on the pairwise alignment scorer."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from drivya.schemas.match import MatchResult
from drivya.schemas.organization import Organization
from drivya.services.alignment import calculate_alignment_score


def rank_partners(
    source: Organization,
    candidates: Iterable[Organization],
    excluded_ids: Collection[str] = (),
) -> list[MatchResult]:
    """Score ``source`` against every other candidate, best match first.

    The source itself and any excluded ids are skipped. Ties keep the
    directory order.
    """
    matches = []
    for candidate in candidates:
        if candidate.id == source.id or candidate.id in excluded_ids:
            continue
        result = calculate_alignment_score(source, candidate)
        matches.append(
            MatchResult.model_validate({
                **candidate.model_dump(),
                "alignment_score": result.score,
                "match_reason": result.reason,
            })
        )
    return sorted(matches, key=lambda m: m.alignment_score, reverse=True)


def recommend_partners(
    source: Organization,
    candidates: Iterable[Organization],
    limit: int = 10,
    offset: int = 0,
    excluded_ids: Collection[str] = (),
) -> tuple[list[MatchResult], int]:
    """Return one page of ranked partners and the total number ranked."""
    ranked = rank_partners(source, candidates, excluded_ids)
    offset = max(offset, 0)
    limit = max(limit, 0)
    return ranked[offset:offset + limit], len(ranked)
