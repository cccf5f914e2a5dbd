"""
Geographic similarity for park entity resolution.

Great-circle distance between two points, turned into a bounded score that
decays linearly from 1.0 at zero distance to 0.0 at ``max_distance_km``.
"""

from __future__ import annotations

import math

from park_graph.constants import DEFAULT_MAX_DISTANCE_KM, EARTH_RADIUS_KM
from park_linking.entity_resolution.models import Coordinates


def haversine_distance_km(a: Coordinates, b: Coordinates) -> float:
    """Great-circle distance in kilometres (Earth radius 6371 km)."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push h just past 1 for near-antipodal points
    h = min(1.0, h)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def location_similarity(
    a: Coordinates | None,
    b: Coordinates | None,
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM,
) -> float:
    """
    Similarity of two locations in [0, 1].

    Args:
        a: First point, or None if unknown
        b: Second point, or None if unknown
        max_distance_km: Distance at which similarity reaches 0

    Returns:
        0.0 if either point is missing or at least ``max_distance_km`` apart,
        1.0 for identical points, otherwise ``1 - distance / max_distance_km``.

    Raises:
        ValueError: If max_distance_km is not positive
    """
    if max_distance_km <= 0:
        raise ValueError(f"max_distance_km must be positive, got {max_distance_km}")

    if a is None or b is None:
        return 0.0

    distance = haversine_distance_km(a, b)

    if distance == 0:
        return 1.0
    if distance >= max_distance_km:
        return 0.0

    return 1 - distance / max_distance_km
