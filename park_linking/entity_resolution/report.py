"""
Reporting helpers for a linking run.

Summarizes match rate and unmatched parks, and explains individual links
in terms of their name and location components.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from park_linking.entity_resolution.character import interpret_name_score, score_name_similarity
from park_linking.entity_resolution.geo import haversine_distance_km
from park_linking.entity_resolution.models import (
    Coordinates,
    CrowdPark,
    FederalPark,
    LinkRecord,
)


@dataclass
class LinkingSummary:
    """Outcome of one linking run."""

    federal_parks: int
    crowd_parks: int
    linked: int
    duration_s: float = 0.0
    unmatched: list[FederalPark] = field(default_factory=list)

    @property
    def match_rate(self) -> float:
        """Fraction of federal parks that received a link (0 when there are none)."""
        if self.federal_parks == 0:
            return 0.0
        return self.linked / self.federal_parks

    def to_dict(self) -> dict:
        return {
            "federal_parks": self.federal_parks,
            "crowd_parks": self.crowd_parks,
            "linked": self.linked,
            "unmatched": len(self.unmatched),
            "match_rate": round(self.match_rate, 4),
            "duration_s": round(self.duration_s, 2),
        }


def summarize_links(
    federal_parks: Sequence[FederalPark],
    crowd_parks: Sequence[CrowdPark],
    links: Sequence[LinkRecord],
    duration_s: float = 0.0,
) -> LinkingSummary:
    """Build a LinkingSummary; unmatched parks keep their input order."""
    linked_ids = {link.source_a_id for link in links}
    return LinkingSummary(
        federal_parks=len(federal_parks),
        crowd_parks=len(crowd_parks),
        linked=len(links),
        duration_s=duration_s,
        unmatched=[p for p in federal_parks if p.id not in linked_ids],
    )


@dataclass
class LinkExplanation:
    """Human-readable breakdown of why two parks were linked."""

    federal_name: str
    crowd_label: str
    confidence_score: float
    confidence_tier: str
    name_similarity: float
    name_interpretation: str
    edit_distance: int
    location_similarity: float
    distance_km: float | None


def explain_link(
    link: LinkRecord,
    federal_park: FederalPark,
    crowd_park: CrowdPark,
) -> LinkExplanation:
    """
    Explain a link using the records it was built from.

    Args:
        link: The link to explain
        federal_park: Record with id ``link.source_a_id``
        crowd_park: Record with id ``link.source_b_id``
    """
    name_score = score_name_similarity(federal_park.name, crowd_park.label)
    a = Coordinates.from_record(federal_park)
    b = Coordinates.from_record(crowd_park)

    return LinkExplanation(
        federal_name=federal_park.name,
        crowd_label=crowd_park.label,
        confidence_score=link.confidence_score,
        confidence_tier=link.confidence_tier.value,
        name_similarity=link.name_similarity,
        name_interpretation=interpret_name_score(link.name_similarity),
        edit_distance=name_score.edit_distance,
        location_similarity=link.location_similarity,
        distance_km=haversine_distance_km(a, b) if a is not None and b is not None else None,
    )


def format_explanation(explanation: LinkExplanation) -> str:
    """Format a LinkExplanation as a short multi-line string."""
    lines = [
        f'"{explanation.federal_name}" ↔ "{explanation.crowd_label}"',
        f"  Score: {explanation.confidence_score * 100:.1f}% ({explanation.confidence_tier})",
        f"  Name: {explanation.name_similarity:.3f} "
        f"({explanation.name_interpretation}, edit distance {explanation.edit_distance})",
    ]
    if explanation.distance_km is None:
        lines.append("  Location: unknown")
    else:
        lines.append(
            f"  Location: {explanation.location_similarity:.3f} "
            f"({explanation.distance_km:.1f} km apart)"
        )
    return "\n".join(lines)
