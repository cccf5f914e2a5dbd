"""
Unit tests for great-circle distance and location similarity.
"""

import math

import pytest

from park_linking.entity_resolution.geo import haversine_distance_km, location_similarity
from park_linking.entity_resolution.models import Coordinates, CrowdPark, FederalPark

OLD_FAITHFUL = Coordinates(latitude=44.4605, longitude=-110.8281)
YELLOWSTONE_LAKE = Coordinates(latitude=44.4280, longitude=-110.5885)
NEW_YORK = Coordinates(latitude=40.7128, longitude=-74.0060)
LOS_ANGELES = Coordinates(latitude=34.0522, longitude=-118.2437)


class TestHaversineDistance:
    """Tests for haversine_distance_km."""

    def test_one_degree_of_longitude_at_equator(self):
        distance = haversine_distance_km(Coordinates(0.0, 0.0), Coordinates(0.0, 1.0))
        assert distance == pytest.approx(6371 * math.pi / 180)

    def test_identical_points(self):
        assert haversine_distance_km(OLD_FAITHFUL, OLD_FAITHFUL) == 0.0

    def test_symmetric(self):
        assert haversine_distance_km(NEW_YORK, LOS_ANGELES) == pytest.approx(
            haversine_distance_km(LOS_ANGELES, NEW_YORK)
        )

    def test_coast_to_coast(self):
        assert haversine_distance_km(NEW_YORK, LOS_ANGELES) == pytest.approx(3936, rel=0.01)

    @pytest.mark.parametrize("latitude", [2.5, 2.6, 5.5, 5.7, 8.0, 12.0, 45.0])
    def test_antipodal_points(self, latitude):
        a = Coordinates(latitude, 10.0)
        b = Coordinates(-latitude, -170.0)
        assert haversine_distance_km(a, b) == pytest.approx(math.pi * 6371)
        assert location_similarity(a, b) == 0.0


class TestLocationSimilarity:
    """Tests for location_similarity."""

    def test_identical_coordinates_score_one(self):
        assert location_similarity(OLD_FAITHFUL, OLD_FAITHFUL) == 1.0

    def test_missing_coordinates_score_zero(self):
        assert location_similarity(None, OLD_FAITHFUL) == 0.0
        assert location_similarity(OLD_FAITHFUL, None) == 0.0
        assert location_similarity(None, None) == 0.0

    def test_far_apart_scores_zero(self):
        assert location_similarity(NEW_YORK, LOS_ANGELES) == 0.0

    def test_linear_decay(self):
        distance = haversine_distance_km(OLD_FAITHFUL, YELLOWSTONE_LAKE)
        assert 0 < distance < 100
        assert location_similarity(OLD_FAITHFUL, YELLOWSTONE_LAKE) == pytest.approx(
            1 - distance / 100
        )

    def test_exactly_max_distance_scores_zero(self):
        distance = haversine_distance_km(OLD_FAITHFUL, YELLOWSTONE_LAKE)
        assert location_similarity(OLD_FAITHFUL, YELLOWSTONE_LAKE, max_distance_km=distance) == 0.0

    def test_custom_max_distance(self):
        a = Coordinates(0.0, 0.0)
        b = Coordinates(0.0, 1.0)
        distance = haversine_distance_km(a, b)
        assert location_similarity(a, b) == 0.0  # ~111 km > 100 km default
        assert location_similarity(a, b, max_distance_km=200) == pytest.approx(1 - distance / 200)

    @pytest.mark.parametrize("max_distance_km", [0, -10])
    def test_non_positive_max_distance_rejected(self, max_distance_km):
        with pytest.raises(ValueError, match="max_distance_km"):
            location_similarity(OLD_FAITHFUL, YELLOWSTONE_LAKE, max_distance_km=max_distance_km)

    def test_bounded(self):
        points = [OLD_FAITHFUL, YELLOWSTONE_LAKE, NEW_YORK, LOS_ANGELES, None]
        for a in points:
            for b in points:
                assert 0.0 <= location_similarity(a, b) <= 1.0


class TestCoordinatesFromRecord:
    """Tests for extracting coordinates from park records."""

    def test_complete_coordinates(self):
        park = FederalPark(id="a1", name="Yellowstone", latitude=44.6, longitude=-110.5)
        assert Coordinates.from_record(park) == Coordinates(44.6, -110.5)

    def test_partial_coordinates_are_missing(self):
        assert Coordinates.from_record(FederalPark(id="a1", name="X", latitude=44.6)) is None
        assert (
            Coordinates.from_record(CrowdPark(id="b1", external_id="Q1", label="X", longitude=1.0))
            is None
        )

    def test_zero_is_a_valid_coordinate(self):
        park = CrowdPark(id="b1", external_id="Q1", label="Null Island", latitude=0.0, longitude=0.0)
        assert Coordinates.from_record(park) == Coordinates(0.0, 0.0)
