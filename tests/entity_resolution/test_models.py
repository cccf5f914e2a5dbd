"""
Unit tests for park record types.
"""

import dataclasses

import pytest

from park_linking.entity_resolution.models import (
    ConfidenceTier,
    CrowdPark,
    FederalPark,
    LinkRecord,
)


class TestFromMapping:
    """Tests for building records from store rows."""

    def test_federal_park_registry_columns(self):
        park = FederalPark.from_mapping(
            {"id": 7, "park_code": "yell", "full_name": "Yellowstone National Park",
             "latitude": "44.6", "longitude": "-110.5"}
        )
        assert park == FederalPark(
            id="7", name="Yellowstone National Park", latitude=44.6, longitude=-110.5,
            park_code="yell",
        )

    def test_federal_park_missing_values(self):
        park = FederalPark.from_mapping({"id": "a1", "name": None, "latitude": "", "longitude": None})
        assert park.name == ""
        assert park.latitude is None
        assert park.longitude is None

    def test_crowd_park_wikidata_columns(self):
        park = CrowdPark.from_mapping(
            {"id": "b1", "wikidata_id": "Q180120", "label": "Yellowstone", "latitude": 44.6,
             "longitude": -110.5}
        )
        assert park.external_id == "Q180120"

    def test_crowd_park_requires_external_id(self):
        with pytest.raises(ValueError, match="external id"):
            CrowdPark.from_mapping({"id": "b1", "label": "Yellowstone"})

    def test_records_are_immutable(self):
        park = FederalPark(id="a1", name="Zion")
        with pytest.raises(dataclasses.FrozenInstanceError):
            park.name = "Bryce"


class TestConfidenceTier:
    """Tests for ConfidenceTier.for_score."""

    @pytest.mark.parametrize(
        "score,tier",
        [
            (1.0, ConfidenceTier.HIGH),
            (0.85, ConfidenceTier.HIGH),
            (0.7, ConfidenceTier.MEDIUM),
            (0.6, ConfidenceTier.MEDIUM),
            (0.59, ConfidenceTier.LOW),
            (0.0, ConfidenceTier.LOW),
        ],
    )
    def test_tiers(self, score, tier):
        assert ConfidenceTier.for_score(score) == tier

    def test_link_record_tier(self):
        link = LinkRecord(
            source_a_id="a1",
            source_b_id="b1",
            source_b_external_id="Q1",
            confidence_score=0.9,
            name_similarity=0.9,
            location_similarity=0.9,
        )
        assert link.confidence_tier == ConfidenceTier.HIGH
        assert link.match_method == "name_location_similarity"
        assert link.source_a_code is None
