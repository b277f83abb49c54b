"""
Shared fixtures for flight path tests.
"""

from typing import List

import pytest

from flight_tracker.schemas.segment import Segment


@pytest.fixture
def sample_flights() -> List[Segment]:
    """The illustrative batch: SFO -> EWR, ATL -> EWR, SFO -> ATL."""
    return [
        Segment("SFO", "EWR"),
        Segment("ATL", "EWR"),
        Segment("SFO", "ATL"),
    ]


@pytest.fixture
def simple_chain() -> List[Segment]:
    """Linear chain A -> B -> C -> D in forward order."""
    return [
        Segment("A", "B"),
        Segment("B", "C"),
        Segment("C", "D"),
    ]


@pytest.fixture
def reversed_chain() -> List[Segment]:
    """Linear chain A -> B -> C -> D listed last hop first."""
    return [
        Segment("C", "D"),
        Segment("B", "C"),
        Segment("A", "B"),
    ]


@pytest.fixture
def cyclic_pair() -> List[Segment]:
    """Two segments whose predecessor links form a cycle."""
    return [
        Segment("A", "B"),
        Segment("B", "A"),
    ]


@pytest.fixture
def two_components() -> List[Segment]:
    """Two disconnected components: WAW -> BCN -> MAD and JFK -> LAX."""
    return [
        Segment("WAW", "BCN"),
        Segment("JFK", "LAX"),
        Segment("BCN", "MAD"),
    ]
