"""
Static segment provider.

Serves a fixed in-memory batch, by default the illustrative flight
list returned by the `flights` operation.
"""

from typing import List, Optional, Sequence

from flight_tracker.ports.segment_provider import SegmentProvider
from flight_tracker.schemas.segment import Segment

SAMPLE_FLIGHTS: tuple[Segment, ...] = (
    Segment(source="SFO", destination="EWR"),
    Segment(source="ATL", destination="EWR"),
    Segment(source="SFO", destination="ATL"),
)


class StaticSegmentProvider(SegmentProvider):
    """Provider backed by a fixed sequence of segments."""

    def __init__(self, segments: Optional[Sequence[Segment]] = None) -> None:
        self._segments = tuple(segments) if segments is not None else SAMPLE_FLIGHTS

    @property
    def name(self) -> str:
        return "Static Provider"

    def get_segments(self) -> List[Segment]:
        # Fresh list per call so callers cannot alter the shared tuple
        return list(self._segments)
