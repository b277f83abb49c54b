"""
Segment Provider port interface.

Defines the abstract contract for sources of segment batches.
"""

from abc import ABC, abstractmethod
from typing import List

from flight_tracker.schemas.segment import Segment


class SegmentProvider(ABC):
    """
    Abstract interface for segment providers.

    Implementations:
    - StaticSegmentProvider: fixed in-memory list
    - FileSegmentProvider: CSV/JSON file validated with SegmentSchema
    """

    @abstractmethod
    def get_segments(self) -> List[Segment]:
        """
        Return the provider's segments in order.

        Raises:
            pandera.errors.SchemaError: If tabular data fails validation.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this provider."""
        ...
