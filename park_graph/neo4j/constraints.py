"""
Neo4j constraint and index creation.

This module provides functions to create constraints and indexes
for FederalPark and CrowdPark nodes.
"""

import logging
from typing import List, Optional

from neo4j.exceptions import Neo4jError

logger = logging.getLogger(__name__)

PARK_CONSTRAINTS = [
    "CREATE CONSTRAINT federal_park_id IF NOT EXISTS FOR (p:FederalPark) REQUIRE p.id IS UNIQUE",
    "CREATE CONSTRAINT crowd_park_id IF NOT EXISTS FOR (p:CrowdPark) REQUIRE p.id IS UNIQUE",
    "CREATE INDEX federal_park_code IF NOT EXISTS FOR (p:FederalPark) ON (p.park_code)",
    "CREATE INDEX crowd_park_external_id IF NOT EXISTS FOR (p:CrowdPark) ON (p.external_id)",
]


def _run_constraints(
    driver,
    constraints: List[str],
    database: Optional[str] = None,
    log: Optional[logging.Logger] = None,
) -> None:
    """
    Run a list of constraint/index creation statements.

    Args:
        driver: Neo4j driver instance
        constraints: List of Cypher constraint statements
        database: Neo4j database name
        log: Logger instance (defaults to module logger)
    """
    if log is None:
        log = logger

    with driver.session(database=database) as session:
        for constraint in constraints:
            try:
                session.run(constraint)
                log.info(f"✓ Created: {constraint[:50]}...")
            except Neo4jError as e:
                error_str = str(e).lower()
                # Constraint already exists - this is fine
                if "already exists" in error_str or "equivalent" in error_str:
                    log.debug(f"Constraint already exists: {constraint[:50]}")
                else:
                    log.warning(f"⚠ Warning creating constraint: {e}")


def create_park_constraints(
    driver, database: Optional[str] = None, logger: Optional[logging.Logger] = None
) -> None:
    """
    Create constraints and indexes for FederalPark and CrowdPark nodes.

    Args:
        driver: Neo4j driver instance
        database: Neo4j database name
        logger: Optional logger instance
    """
    _run_constraints(driver, PARK_CONSTRAINTS, database=database, log=logger)
