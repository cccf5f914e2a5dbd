"""
Candidate matching for park entity resolution.

Scans a pool of crowd parks for the single best match to one federal park.
Pure function: no I/O, no side effects, O(len(pool)).
"""

from __future__ import annotations

from typing import Iterable

from park_graph.constants import DEFAULT_LINK_THRESHOLD, DEFAULT_MAX_DISTANCE_KM
from park_linking.entity_resolution.character import name_similarity
from park_linking.entity_resolution.combined_scorer import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    overall_score,
)
from park_linking.entity_resolution.geo import location_similarity
from park_linking.entity_resolution.models import (
    Coordinates,
    CrowdPark,
    FederalPark,
    MatchCandidate,
)


def score_candidate(
    federal_park: FederalPark,
    crowd_park: CrowdPark,
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> MatchCandidate:
    """Score one federal/crowd pairing."""
    name_score = name_similarity(federal_park.name, crowd_park.label)
    location_score = location_similarity(
        Coordinates.from_record(federal_park),
        Coordinates.from_record(crowd_park),
        max_distance_km=max_distance_km,
    )
    return MatchCandidate(
        federal_park=federal_park,
        crowd_park=crowd_park,
        name_similarity=name_score,
        location_similarity=location_score,
        overall_score=overall_score(name_score, location_score, weights),
    )


def find_best_match(
    federal_park: FederalPark,
    pool: Iterable[CrowdPark],
    threshold: float = DEFAULT_LINK_THRESHOLD,
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> MatchCandidate | None:
    """
    Find the highest-scoring crowd park for a federal park.

    Ties go to the candidate seen first (strict ``>``), so the result
    depends on pool order. A candidate scoring exactly 0 is never selected.

    Args:
        federal_park: Park to match
        pool: Unclaimed crowd parks, in the caller's order
        threshold: Minimum overall score (inclusive)
        max_distance_km: Passed through to location similarity
        weights: Composite score weights

    Returns:
        The best MatchCandidate, or None if nothing reaches ``threshold``
    """
    best: MatchCandidate | None = None
    best_score = 0.0

    for crowd_park in pool:
        candidate = score_candidate(federal_park, crowd_park, max_distance_km, weights)
        if candidate.overall_score > best_score:
            best_score = candidate.overall_score
            best = candidate

    if best is None or best_score < threshold:
        return None

    return best
