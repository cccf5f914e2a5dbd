"""
Configuration management for park_graph.

Loads environment variables and provides configuration defaults.
"""

import os
from typing import Tuple

from dotenv import load_dotenv

from park_graph.constants import (
    DEFAULT_LINK_THRESHOLD,
    DEFAULT_LOCATION_WEIGHT,
    DEFAULT_MAX_DISTANCE_KM,
    DEFAULT_NAME_WEIGHT,
)

# Load environment variables from .env file
load_dotenv()


# Neo4j configuration
def get_neo4j_uri() -> str:
    """Get Neo4j URI from environment or default."""
    return os.getenv("NEO4J_URI", "bolt://localhost:7687")


def get_neo4j_user() -> str:
    """Get Neo4j username from environment or default."""
    return os.getenv("NEO4J_USER", "neo4j")


def get_neo4j_password() -> str:
    """Get Neo4j password from environment."""
    password = os.getenv("NEO4J_PASSWORD", "")
    if not password:
        raise ValueError("NEO4J_PASSWORD not set in .env file")
    return password


def get_neo4j_database() -> str:
    """Get Neo4j database name from environment or default."""
    return os.getenv("NEO4J_DATABASE", "neo4j")


# Linking configuration
def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def get_link_threshold() -> float:
    """Get the minimum confidence score for a park link."""
    return _get_float("PARK_LINK_THRESHOLD", DEFAULT_LINK_THRESHOLD)


def get_link_max_distance_km() -> float:
    """Get the distance (km) at which location similarity drops to zero."""
    return _get_float("PARK_LINK_MAX_DISTANCE_KM", DEFAULT_MAX_DISTANCE_KM)


def get_link_weights() -> Tuple[float, float]:
    """Get (name, location) weights for the composite score."""
    return (
        _get_float("PARK_LINK_NAME_WEIGHT", DEFAULT_NAME_WEIGHT),
        _get_float("PARK_LINK_LOCATION_WEIGHT", DEFAULT_LOCATION_WEIGHT),
    )
