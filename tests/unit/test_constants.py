"""
Unit tests for park_graph.constants module.
"""

from park_graph.constants import (
    BATCH_SIZE_LINKS,
    DEFAULT_LINK_THRESHOLD,
    DEFAULT_LOCATION_WEIGHT,
    DEFAULT_MAX_DISTANCE_KM,
    DEFAULT_NAME_WEIGHT,
    EARTH_RADIUS_KM,
    HIGH_CONFIDENCE_THRESHOLD,
    MATCH_METHOD,
    MEDIUM_CONFIDENCE_THRESHOLD,
)


def test_batch_size_is_positive():
    """Test that the link batch size is a positive integer."""
    assert BATCH_SIZE_LINKS > 0


def test_default_threshold_in_range():
    """Test default threshold is a valid score."""
    assert 0 <= DEFAULT_LINK_THRESHOLD <= 1


def test_default_weights_sum_to_one():
    """Test default weights keep the composite score in [0, 1]."""
    assert abs(DEFAULT_NAME_WEIGHT + DEFAULT_LOCATION_WEIGHT - 1.0) < 1e-9
    assert DEFAULT_NAME_WEIGHT > DEFAULT_LOCATION_WEIGHT


def test_default_max_distance_positive():
    """Test default max distance is positive."""
    assert DEFAULT_MAX_DISTANCE_KM > 0


def test_earth_radius():
    """Test the haversine radius is the mean Earth radius."""
    assert EARTH_RADIUS_KM == 6371


def test_confidence_tiers_ordered():
    """Test confidence tier thresholds are ordered."""
    assert MEDIUM_CONFIDENCE_THRESHOLD <= HIGH_CONFIDENCE_THRESHOLD <= 1


def test_match_method_tag():
    """Test the match method tag stored on links."""
    assert MATCH_METHOD == "name_location_similarity"
