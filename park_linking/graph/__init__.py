"""Neo4j readers, loaders and link persistence for the park graph."""

from park_linking.graph.loaders import load_crowd_parks, load_federal_parks
from park_linking.graph.persistence import (
    LinkPersistenceError,
    LinkPersister,
    Neo4jLinkPersister,
    PersistResult,
)
from park_linking.graph.readers import (
    count_park_links,
    fetch_crowd_parks,
    fetch_federal_parks,
    sample_park_links,
)

__all__ = [
    "load_federal_parks",
    "load_crowd_parks",
    "fetch_federal_parks",
    "fetch_crowd_parks",
    "count_park_links",
    "sample_park_links",
    "LinkPersister",
    "Neo4jLinkPersister",
    "PersistResult",
    "LinkPersistenceError",
]
