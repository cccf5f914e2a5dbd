"""Neo4j connection and utilities."""

from park_graph.neo4j.connection import (
    get_neo4j_driver,
    verify_connection,
)
from park_graph.neo4j.constraints import create_park_constraints

__all__ = [
    "get_neo4j_driver",
    "verify_connection",
    "create_park_constraints",
]
