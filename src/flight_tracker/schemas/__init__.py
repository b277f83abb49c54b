"""
Schema definitions for the Flight Tracker.

Dataclasses for in-memory batches and results; a Pandera model for
tabular segment input.
"""

from .path import FlightPath, PathMode
from .segment import (
    FlightSchema,
    Segment,
    SegmentDataFrame,
    SegmentSchema,
    segments_from_frame,
)

__all__ = [
    # Segment schemas
    "Segment",
    "FlightSchema",
    "SegmentSchema",
    "SegmentDataFrame",
    "segments_from_frame",
    # Path schemas
    "FlightPath",
    "PathMode",
]
