"""
Adapter implementations for the Flight Tracker ports.
"""

from flight_tracker.adapters.algorithms import ChainPathFinder, TraversalPathFinder
from flight_tracker.adapters.providers import (
    FileSegmentProvider,
    StaticSegmentProvider,
)

__all__ = [
    "ChainPathFinder",
    "FileSegmentProvider",
    "StaticSegmentProvider",
    "TraversalPathFinder",
]
