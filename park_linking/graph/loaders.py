"""
Neo4j data loaders for FederalPark and CrowdPark nodes.

This module provides functions to load park records into Neo4j so the
linking engine can read them back.
"""

from dataclasses import asdict
from typing import List, Optional

from park_graph.constants import BATCH_SIZE_LINKS
from park_linking.entity_resolution.models import CrowdPark, FederalPark


def load_federal_parks(
    driver,
    parks: List[FederalPark],
    batch_size: int = BATCH_SIZE_LINKS,
    database: Optional[str] = None,
) -> int:
    """
    Load FederalPark nodes into Neo4j.

    Args:
        driver: Neo4j driver instance
        parks: Federal park records
        batch_size: Number of parks to process per batch
        database: Neo4j database name

    Returns:
        Number of parks written
    """
    query = """
    UNWIND $batch AS row
    MERGE (p:FederalPark {id: row.id})
    SET p.name = row.name,
        p.park_code = row.park_code,
        p.latitude = row.latitude,
        p.longitude = row.longitude,
        p.loaded_at = datetime()
    """
    rows = [asdict(park) for park in parks]
    with driver.session(database=database) as session:
        for i in range(0, len(rows), batch_size):
            session.run(query, batch=rows[i : i + batch_size]).consume()
    return len(rows)


def load_crowd_parks(
    driver,
    parks: List[CrowdPark],
    batch_size: int = BATCH_SIZE_LINKS,
    database: Optional[str] = None,
) -> int:
    """
    Load CrowdPark nodes into Neo4j.

    Args:
        driver: Neo4j driver instance
        parks: Crowd-sourced park records
        batch_size: Number of parks to process per batch
        database: Neo4j database name

    Returns:
        Number of parks written
    """
    query = """
    UNWIND $batch AS row
    MERGE (p:CrowdPark {id: row.id})
    SET p.external_id = row.external_id,
        p.label = row.label,
        p.latitude = row.latitude,
        p.longitude = row.longitude,
        p.loaded_at = datetime()
    """
    rows = [asdict(park) for park in parks]
    with driver.session(database=database) as session:
        for i in range(0, len(rows), batch_size):
            session.run(query, batch=rows[i : i + batch_size]).consume()
    return len(rows)
