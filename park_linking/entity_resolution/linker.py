"""
Park linking driver.

Links every federal park to at most one crowd park, and every crowd park to
at most one federal park, within a single run.

The assignment is greedy: federal parks are processed in input order and
each one claims its best unclaimed crowd park. Earlier parks therefore win
contested crowd parks, and an early choice is never revisited even if it
blocks a better overall assignment. Reordering the input can change the
output. This is a known limitation, kept deliberately; swapping in an
optimal bipartite assignment would change results for ambiguous datasets.

Progress is reported through an optional synchronous callback. To cancel a
long run, raise from the callback; the exception propagates out of
``link_records`` and no partial result is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Iterator, Sequence

from park_graph.config import get_link_max_distance_km, get_link_threshold, get_link_weights
from park_graph.constants import DEFAULT_LINK_THRESHOLD, DEFAULT_MAX_DISTANCE_KM
from park_linking.entity_resolution.combined_scorer import DEFAULT_WEIGHTS, ScoringWeights
from park_linking.entity_resolution.matcher import find_best_match
from park_linking.entity_resolution.models import (
    CrowdPark,
    FederalPark,
    LinkProgress,
    LinkRecord,
    LinkResult,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[LinkProgress], None]


class InvalidLinkingConfigError(ValueError):
    """Raised before any matching when the linking configuration is invalid."""


@dataclass(frozen=True)
class LinkingConfig:
    """Tunable linking parameters."""

    threshold: float = DEFAULT_LINK_THRESHOLD
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM
    weights: ScoringWeights = field(default_factory=ScoringWeights)

    def validate(self) -> None:
        """
        Fail fast on a configuration that would silently corrupt a run.

        Raises:
            InvalidLinkingConfigError: threshold outside [0, 1],
                non-positive max_distance_km, or invalid weights
        """
        if not 0.0 <= self.threshold <= 1.0:
            raise InvalidLinkingConfigError(
                f"threshold must be within [0, 1], got {self.threshold}"
            )
        if not self.max_distance_km > 0:
            raise InvalidLinkingConfigError(
                f"max_distance_km must be positive, got {self.max_distance_km}"
            )
        try:
            self.weights.validate()
        except ValueError as e:
            raise InvalidLinkingConfigError(str(e)) from e

    def with_overrides(
        self, threshold: float | None = None, max_distance_km: float | None = None
    ) -> LinkingConfig:
        """Copy with the given values replaced; None keeps the current value."""
        changes = {}
        if threshold is not None:
            changes["threshold"] = threshold
        if max_distance_km is not None:
            changes["max_distance_km"] = max_distance_km
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> LinkingConfig:
        """Build from PARK_LINK_* environment variables, falling back to defaults."""
        name_weight, location_weight = get_link_weights()
        return cls(
            threshold=get_link_threshold(),
            max_distance_km=get_link_max_distance_km(),
            weights=ScoringWeights(name=name_weight, location=location_weight),
        )


def iter_link_results(
    federal_parks: Sequence[FederalPark],
    crowd_parks: Sequence[CrowdPark],
    config: LinkingConfig | None = None,
) -> Iterator[LinkResult]:
    """
    Yield one LinkResult per federal park, in input order.

    The claimed set lives inside the generator, so a partially consumed
    iterator cannot be restarted; call again for a fresh run. Configuration
    is validated when the first result is requested.
    """
    config = config or LinkingConfig()
    config.validate()

    if not federal_parks or not crowd_parks:
        return

    claimed: set[str] = set()

    for federal_park in federal_parks:
        pool = [cp for cp in crowd_parks if cp.external_id not in claimed]

        match = find_best_match(
            federal_park,
            pool,
            threshold=config.threshold,
            max_distance_km=config.max_distance_km,
            weights=config.weights,
        )

        if match is None:
            yield LinkResult(federal_park=federal_park, link=None)
            continue

        claimed.add(match.crowd_park.external_id)
        link = LinkRecord.from_candidate(match)
        logger.debug(
            f"Linked {federal_park.name!r} -> {match.crowd_park.label!r} "
            f"({link.source_b_external_id}, score={link.confidence_score:.3f})"
        )
        yield LinkResult(federal_park=federal_park, link=link)


def link_records(
    federal_parks: Sequence[FederalPark],
    crowd_parks: Sequence[CrowdPark],
    threshold: float = DEFAULT_LINK_THRESHOLD,
    on_progress: ProgressCallback | None = None,
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[LinkRecord]:
    """
    Link federal parks to crowd parks.

    Args:
        federal_parks: Source A records, processed in this order
        crowd_parks: Source B records; scanned in this order for each park
        threshold: Minimum confidence for a link (inclusive, within [0, 1])
        on_progress: Called synchronously after each federal park
        max_distance_km: Distance at which location similarity drops to 0
        weights: Composite score weights (must sum to 1.0)

    Returns:
        One LinkRecord per matched federal park, in federal park order

    Raises:
        InvalidLinkingConfigError: Before any matching, for a bad configuration
    """
    config = LinkingConfig(threshold=threshold, max_distance_km=max_distance_km, weights=weights)
    config.validate()

    if not federal_parks or not crowd_parks:
        return []

    links: list[LinkRecord] = []
    total = len(federal_parks)

    for index, result in enumerate(iter_link_results(federal_parks, crowd_parks, config), 1):
        if result.link is not None:
            links.append(result.link)

        if on_progress is not None:
            on_progress(
                LinkProgress(
                    current=index,
                    total=total,
                    matched=len(links),
                    current_name=result.federal_park.name,
                )
            )

    logger.info(f"Linked {len(links)}/{total} federal parks (threshold={threshold})")
    return links
