"""
Constants for park_graph package.

Centralizes magic numbers and configuration defaults.
"""

# Batch size for Neo4j link writes
BATCH_SIZE_LINKS = 1000

# Linking defaults
DEFAULT_LINK_THRESHOLD = 0.6
DEFAULT_MAX_DISTANCE_KM = 100.0
DEFAULT_NAME_WEIGHT = 0.7  # Name is the more reliable signal
DEFAULT_LOCATION_WEIGHT = 0.3  # Location breaks ties and boosts confidence

# Tag stored on every link so reruns with a different algorithm can be told apart
MATCH_METHOD = "name_location_similarity"

# Mean Earth radius used by the haversine formula
EARTH_RADIUS_KM = 6371.0

# Confidence tiers for reporting
HIGH_CONFIDENCE_THRESHOLD = 0.85
MEDIUM_CONFIDENCE_THRESHOLD = 0.6

# How many sample / unmatched parks the linking script prints
SAMPLE_MATCHES_SHOWN = 5
UNMATCHED_PARKS_SHOWN = 10
