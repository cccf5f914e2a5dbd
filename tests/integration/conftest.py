"""
Fixtures for integration tests against a running Neo4j instance.

Skip with: pytest -m "not integration"
"""

import os

import pytest
from neo4j import GraphDatabase
from neo4j.exceptions import AuthError, ServiceUnavailable


@pytest.fixture
def neo4j_driver():
    """Fixture providing Neo4j driver."""
    uri = os.getenv("NEO4J_URI", "bolt://localhost:7687")
    user = os.getenv("NEO4J_USER", "neo4j")
    password = os.getenv("NEO4J_PASSWORD")

    if not password:
        pytest.skip("NEO4J_PASSWORD not set")

    driver = GraphDatabase.driver(uri, auth=(user, password))
    try:
        driver.verify_connectivity()
    except (ServiceUnavailable, AuthError) as e:
        driver.close()
        pytest.skip(f"Neo4j not reachable: {e}")

    yield driver
    driver.close()


@pytest.fixture
def test_database():
    """Return database name for testing."""
    return os.getenv("NEO4J_DATABASE", "neo4j")
