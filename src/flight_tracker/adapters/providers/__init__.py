"""
Segment providers.
"""

from flight_tracker.adapters.providers.file_provider import FileSegmentProvider
from flight_tracker.adapters.providers.static_provider import (
    SAMPLE_FLIGHTS,
    StaticSegmentProvider,
)

__all__ = [
    "FileSegmentProvider",
    "SAMPLE_FLIGHTS",
    "StaticSegmentProvider",
]
