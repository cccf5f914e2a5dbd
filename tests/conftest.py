"""
Pytest configuration and shared fixtures for park graph tests.
"""

import os

import pytest

from park_linking.entity_resolution.models import CrowdPark, FederalPark

# Set test environment variables if not already set
if not os.getenv("NEO4J_URI"):
    os.environ["NEO4J_URI"] = "bolt://localhost:7687"
if not os.getenv("NEO4J_USER"):
    os.environ["NEO4J_USER"] = "neo4j"
if not os.getenv("NEO4J_DATABASE"):
    os.environ["NEO4J_DATABASE"] = "neo4j"


@pytest.fixture
def federal_parks():
    """A handful of federal registry parks."""
    return [
        FederalPark(
            id="a1", name="Yellowstone National Park", latitude=44.6, longitude=-110.5,
            park_code="yell",
        ),
        FederalPark(
            id="a2", name="Zion National Park", latitude=37.3, longitude=-113.0, park_code="zion"
        ),
        FederalPark(
            id="a3", name="Grand Canyon National Park", latitude=36.1, longitude=-112.1,
            park_code="grca",
        ),
        FederalPark(id="a4", name="Acadia National Park", park_code="acad"),
    ]


@pytest.fixture
def crowd_parks():
    """Crowd-sourced parks covering most of federal_parks, in a different order."""
    return [
        CrowdPark(
            id="b3", external_id="Q118841", label="Grand Canyon National Park",
            latitude=36.06, longitude=-112.14,
        ),
        CrowdPark(
            id="b1", external_id="Q180120", label="Yellowstone National Park",
            latitude=44.6, longitude=-110.5,
        ),
        CrowdPark(
            id="b2", external_id="Q206599", label="Zion National Park",
            latitude=37.298, longitude=-113.026,
        ),
        CrowdPark(
            id="b9", external_id="Q1129020", label="Joshua Tree National Park",
            latitude=33.88, longitude=-115.9,
        ),
    ]
