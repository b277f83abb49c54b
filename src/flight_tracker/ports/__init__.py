"""
Port interfaces for the Flight Tracker.

Ports define the abstract interfaces that the service layer uses to talk
to algorithms and segment sources (Ports and Adapters architecture).
"""

from flight_tracker.ports.path_finder import PathFinder
from flight_tracker.ports.segment_provider import SegmentProvider

__all__ = [
    "PathFinder",
    "SegmentProvider",
]
