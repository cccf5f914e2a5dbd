"""
Combined scoring for park entity resolution.

The overall confidence is a weighted linear combination of name and
location similarity. Name carries most of the weight because coordinates
are often imprecise or missing in one of the sources; location acts as a
tie-breaker and confidence booster.
"""

from __future__ import annotations

from dataclasses import dataclass

from park_graph.constants import DEFAULT_LOCATION_WEIGHT, DEFAULT_NAME_WEIGHT

WEIGHT_SUM_TOLERANCE = 1e-9


@dataclass(frozen=True)
class ScoringWeights:
    """Weights for the composite score. Must sum to 1.0 to stay in [0, 1]."""

    name: float = DEFAULT_NAME_WEIGHT
    location: float = DEFAULT_LOCATION_WEIGHT

    def validate(self) -> None:
        """
        Raise ValueError unless both weights are non-negative and sum to 1.0.

        The sum may fall short of 1.0 by float rounding but never exceed it,
        so combined scores cannot rise above 1.0.
        """
        if self.name < 0 or self.location < 0:
            raise ValueError(
                f"weights must be non-negative, got name={self.name}, location={self.location}"
            )
        total = self.name + self.location
        if not 1.0 - WEIGHT_SUM_TOLERANCE <= total <= 1.0:
            raise ValueError(f"weights must sum to 1.0, got {total}")


DEFAULT_WEIGHTS = ScoringWeights()


def overall_score(
    name_similarity: float,
    location_similarity: float,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """
    Combine name and location similarity into one confidence value.

    Precondition: ``weights`` sum to 1.0 (checked by ``LinkingConfig``,
    not here).
    """
    return name_similarity * weights.name + location_similarity * weights.location
