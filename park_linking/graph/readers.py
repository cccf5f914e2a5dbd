"""
Neo4j readers for park records and existing links.

Reads the two park sources as plain records for the linking engine.
"""

from __future__ import annotations

from typing import List, Optional

from park_linking.entity_resolution.models import CrowdPark, FederalPark


def fetch_federal_parks(driver, database: Optional[str] = None) -> List[FederalPark]:
    """Fetch all FederalPark nodes, ordered by name."""
    query = """
    MATCH (p:FederalPark)
    RETURN p.id AS id, p.name AS name, p.park_code AS park_code,
           p.latitude AS latitude, p.longitude AS longitude
    ORDER BY p.name, p.id
    """
    with driver.session(database=database) as session:
        return [FederalPark.from_mapping(record) for record in session.run(query)]


def fetch_crowd_parks(driver, database: Optional[str] = None) -> List[CrowdPark]:
    """Fetch all CrowdPark nodes, ordered by label."""
    query = """
    MATCH (p:CrowdPark)
    RETURN p.id AS id, p.external_id AS external_id, p.label AS label,
           p.latitude AS latitude, p.longitude AS longitude
    ORDER BY p.label, p.id
    """
    with driver.session(database=database) as session:
        return [CrowdPark.from_mapping(record) for record in session.run(query)]


def count_park_links(driver, database: Optional[str] = None) -> int:
    """Count SAME_AS relationships."""
    query = "MATCH (:FederalPark)-[r:SAME_AS]->(:CrowdPark) RETURN count(r) AS count"
    with driver.session(database=database) as session:
        return session.run(query).single()["count"]


def sample_park_links(driver, limit: int = 5, database: Optional[str] = None) -> List[dict]:
    """Return up to ``limit`` links with both park names, highest confidence first."""
    query = """
    MATCH (a:FederalPark)-[r:SAME_AS]->(b:CrowdPark)
    RETURN a.name AS federal_name, b.label AS crowd_label,
           b.external_id AS external_id, r.confidence_score AS confidence_score
    ORDER BY r.confidence_score DESC, a.name
    LIMIT $limit
    """
    with driver.session(database=database) as session:
        return [dict(record) for record in session.run(query, limit=limit)]
