"""
Link persistence.

The linking engine never talks to storage. Callers hand its output to a
``LinkPersister``; the Neo4j implementation upserts SAME_AS relationships
keyed by the (federal park id, crowd park id) pair, so persisting the same
run twice does not duplicate links.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from neo4j.exceptions import DriverError, Neo4jError

from park_graph.constants import BATCH_SIZE_LINKS
from park_graph.retry import retry_neo4j
from park_linking.entity_resolution.models import LinkRecord

logger = logging.getLogger(__name__)


class LinkPersistenceError(RuntimeError):
    """Raised when links cannot be written; the storage error is chained."""


@dataclass(frozen=True)
class PersistResult:
    """Number of links written (inserted or updated)."""

    inserted: int


class LinkPersister(Protocol):
    """Anything that can store a batch of links idempotently."""

    def persist(self, links: Sequence[LinkRecord]) -> PersistResult: ...


UPSERT_LINKS_QUERY = """
UNWIND $batch AS row
MATCH (a:FederalPark {id: row.source_a_id})
MATCH (b:CrowdPark {id: row.source_b_id})
MERGE (a)-[r:SAME_AS]->(b)
SET r.external_id = row.source_b_external_id,
    r.confidence_score = row.confidence_score,
    r.name_similarity = row.name_similarity,
    r.location_similarity = row.location_similarity,
    r.match_method = row.match_method,
    r.linked_at = datetime()
RETURN count(r) AS written
"""


@retry_neo4j
def _write_batch(session, batch: list[dict]) -> int:
    record = session.run(UPSERT_LINKS_QUERY, batch=batch).single()
    return record["written"] if record else 0


class Neo4jLinkPersister:
    """
    Upsert links into Neo4j as (:FederalPark)-[:SAME_AS]->(:CrowdPark).

    Links whose endpoints are missing from the graph are skipped by the
    MATCH clauses and not counted.
    """

    def __init__(
        self,
        driver,
        database: str | None = None,
        batch_size: int = BATCH_SIZE_LINKS,
    ):
        """
        Initialize the persister.

        Args:
            driver: Neo4j driver instance
            database: Neo4j database name
            batch_size: Links per UNWIND batch
        """
        if batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.driver = driver
        self.database = database
        self.batch_size = batch_size

    def persist(self, links: Sequence[LinkRecord]) -> PersistResult:
        """
        Write links in batches.

        Returns:
            PersistResult with the number of relationships written

        Raises:
            LinkPersistenceError: If Neo4j rejects a write after retries
        """
        if not links:
            return PersistResult(inserted=0)

        rows = [link.to_dict() for link in links]
        written = 0

        try:
            with self.driver.session(database=self.database) as session:
                for i in range(0, len(rows), self.batch_size):
                    batch = rows[i : i + self.batch_size]
                    written += _write_batch(session, batch)
                    logger.debug(f"  Wrote {i + len(batch)}/{len(rows)} links")
        except (Neo4jError, DriverError, ConnectionError, TimeoutError) as e:
            raise LinkPersistenceError(f"Failed to save park links: {e}") from e

        if written < len(rows):
            logger.warning(
                f"{len(rows) - written} links skipped (park nodes missing from the graph)"
            )

        return PersistResult(inserted=written)
