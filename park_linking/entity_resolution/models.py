"""
Record types for park entity resolution.

Source A is the federal park registry (NPS), source B the crowd-sourced
knowledge base (Wikidata). Input records are frozen; the engine never
mutates them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Mapping

from park_graph.constants import (
    HIGH_CONFIDENCE_THRESHOLD,
    MATCH_METHOD,
    MEDIUM_CONFIDENCE_THRESHOLD,
)


def _optional_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


@dataclass(frozen=True)
class Coordinates:
    """A point in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def from_record(cls, record: FederalPark | CrowdPark) -> Coordinates | None:
        """Return the record's coordinates, or None if either part is missing."""
        if record.latitude is None or record.longitude is None:
            return None
        return cls(latitude=record.latitude, longitude=record.longitude)


@dataclass(frozen=True)
class FederalPark:
    """A park from the federal registry (source A)."""

    id: str
    name: str
    latitude: float | None = None
    longitude: float | None = None
    park_code: str | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> FederalPark:
        """
        Build from a store row.

        Accepts either field names (``name``) or registry column names
        (``full_name``).
        """
        return cls(
            id=str(row["id"]),
            name=row.get("name", row.get("full_name")) or "",
            latitude=_optional_float(row.get("latitude")),
            longitude=_optional_float(row.get("longitude")),
            park_code=row.get("park_code"),
        )


@dataclass(frozen=True)
class CrowdPark:
    """A park from the crowd-sourced knowledge base (source B)."""

    id: str
    external_id: str  # e.g. Wikidata Q-id, distinct namespace from id
    label: str
    latitude: float | None = None
    longitude: float | None = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> CrowdPark:
        """Build from a store row (``external_id`` or ``wikidata_id``)."""
        external_id = row.get("external_id") or row.get("wikidata_id")
        if not external_id:
            raise ValueError(f"crowd park {row['id']!r} has no external id")
        return cls(
            id=str(row["id"]),
            external_id=str(external_id),
            label=row.get("label") or "",
            latitude=_optional_float(row.get("latitude")),
            longitude=_optional_float(row.get("longitude")),
        )


@dataclass(frozen=True)
class MatchCandidate:
    """A scored pairing of one federal park with one crowd park."""

    federal_park: FederalPark
    crowd_park: CrowdPark
    name_similarity: float
    location_similarity: float
    overall_score: float


class ConfidenceTier(str, Enum):
    """Confidence tier for link quality."""

    HIGH = "high"  # Safe to trust
    MEDIUM = "medium"  # Worth a spot check
    LOW = "low"  # Only possible with a threshold below the default

    @classmethod
    def for_score(cls, score: float) -> ConfidenceTier:
        if score >= HIGH_CONFIDENCE_THRESHOLD:
            return cls.HIGH
        if score >= MEDIUM_CONFIDENCE_THRESHOLD:
            return cls.MEDIUM
        return cls.LOW


@dataclass(frozen=True)
class LinkRecord:
    """A link between a federal park and a crowd park, ready to persist."""

    source_a_id: str
    source_b_id: str
    source_b_external_id: str
    confidence_score: float
    name_similarity: float
    location_similarity: float
    match_method: str = MATCH_METHOD
    source_a_code: str | None = None

    @classmethod
    def from_candidate(cls, candidate: MatchCandidate) -> LinkRecord:
        return cls(
            source_a_id=candidate.federal_park.id,
            source_b_id=candidate.crowd_park.id,
            source_b_external_id=candidate.crowd_park.external_id,
            confidence_score=candidate.overall_score,
            name_similarity=candidate.name_similarity,
            location_similarity=candidate.location_similarity,
            source_a_code=candidate.federal_park.park_code,
        )

    @property
    def confidence_tier(self) -> ConfidenceTier:
        return ConfidenceTier.for_score(self.confidence_score)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LinkProgress:
    """Progress payload passed to ``on_progress`` after each federal park."""

    current: int  # 1-based index of the park just processed
    total: int
    matched: int  # Links emitted so far
    current_name: str


@dataclass(frozen=True)
class LinkResult:
    """Outcome for one federal park: the link, or None if unmatched."""

    federal_park: FederalPark
    link: LinkRecord | None

    @property
    def matched(self) -> bool:
        return self.link is not None
