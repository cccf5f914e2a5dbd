"""
Entity Resolution Module.

Links federal park records to crowd-sourced park records.

This module separates concerns into distinct, testable components:
- Name normalization and edit-distance similarity (character)
- Great-circle distance and location similarity (geo)
- Weighted composite scoring (combined_scorer)
- Best-candidate selection for one park (matcher)
- Greedy one-to-one linking across all parks (linker)
- Run summaries and link explanations (report)

Every component is a pure function over plain records; persistence lives in
park_linking.graph.
"""

from park_linking.entity_resolution.character import (
    NameScore,
    levenshtein_distance,
    name_similarity,
    normalize,
    score_name_similarity,
)
from park_linking.entity_resolution.combined_scorer import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    overall_score,
)
from park_linking.entity_resolution.geo import (
    haversine_distance_km,
    location_similarity,
)
from park_linking.entity_resolution.linker import (
    InvalidLinkingConfigError,
    LinkingConfig,
    iter_link_results,
    link_records,
)
from park_linking.entity_resolution.matcher import (
    find_best_match,
    score_candidate,
)
from park_linking.entity_resolution.models import (
    ConfidenceTier,
    Coordinates,
    CrowdPark,
    FederalPark,
    LinkProgress,
    LinkRecord,
    LinkResult,
    MatchCandidate,
)
from park_linking.entity_resolution.report import (
    LinkingSummary,
    explain_link,
    summarize_links,
)

__all__ = [
    # Models
    "Coordinates",
    "FederalPark",
    "CrowdPark",
    "MatchCandidate",
    "LinkRecord",
    "LinkProgress",
    "LinkResult",
    "ConfidenceTier",
    # Name similarity
    "normalize",
    "levenshtein_distance",
    "name_similarity",
    "score_name_similarity",
    "NameScore",
    # Location similarity
    "haversine_distance_km",
    "location_similarity",
    # Composite scoring
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "overall_score",
    # Matching
    "find_best_match",
    "score_candidate",
    # Linking
    "LinkingConfig",
    "InvalidLinkingConfigError",
    "iter_link_results",
    "link_records",
    # Reporting
    "LinkingSummary",
    "summarize_links",
    "explain_link",
]
