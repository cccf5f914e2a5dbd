"""
Park Graph - shared infrastructure for the park identity graph.

This package provides utilities for:
- Loading configuration from the environment (.env)
- Connecting to Neo4j and creating park constraints
- Retrying transient Neo4j failures
- Common CLI and logging setup for scripts
"""

__version__ = "0.1.0"

# Re-export commonly used items
from park_graph.config import (
    get_link_max_distance_km,
    get_link_threshold,
    get_link_weights,
    get_neo4j_database,
    get_neo4j_uri,
)
from park_graph.constants import (
    BATCH_SIZE_LINKS,
    DEFAULT_LINK_THRESHOLD,
    DEFAULT_LOCATION_WEIGHT,
    DEFAULT_MAX_DISTANCE_KM,
    DEFAULT_NAME_WEIGHT,
    MATCH_METHOD,
)

__all__ = [
    "__version__",
    # Config
    "get_neo4j_uri",
    "get_neo4j_database",
    "get_link_threshold",
    "get_link_max_distance_km",
    "get_link_weights",
    # Constants
    "BATCH_SIZE_LINKS",
    "DEFAULT_LINK_THRESHOLD",
    "DEFAULT_MAX_DISTANCE_KM",
    "DEFAULT_NAME_WEIGHT",
    "DEFAULT_LOCATION_WEIGHT",
    "MATCH_METHOD",
]
