"""
Fixtures for FastAPI endpoint tests.
"""

import pytest
from fastapi.testclient import TestClient

from flight_tracker.api.flights_api import app


@pytest.fixture
def client() -> TestClient:
    """HTTP client bound to the API app."""
    return TestClient(app)


@pytest.fixture
def sample_payload() -> list:
    """The illustrative batch in wire format."""
    return [
        {"source": "SFO", "destination": "EWR"},
        {"source": "ATL", "destination": "EWR"},
        {"source": "SFO", "destination": "ATL"},
    ]


@pytest.fixture
def chain_payload() -> list:
    """A -> B -> C -> D listed last hop first."""
    return [
        {"source": "C", "destination": "D"},
        {"source": "B", "destination": "C"},
        {"source": "A", "destination": "B"},
    ]
