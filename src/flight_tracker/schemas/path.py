"""
Path result schemas.

Defines the output contract of the path algorithms.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class PathMode(str, Enum):
    """How a path is derived from a batch of segments."""

    TRAVERSAL = "traversal"
    CHAIN = "chain"


@dataclass(frozen=True)
class FlightPath:
    """
    Immutable result of one path calculation.

    Attributes:
        path: Ordered labels produced by the algorithm.
        mode: Algorithm that produced the path.
        segment_count: Number of segments in the input batch.
    """

    path: Tuple[str, ...]
    mode: PathMode
    segment_count: int

    @property
    def length(self) -> int:
        """Number of labels in the path."""
        return len(self.path)

    @property
    def start(self) -> str:
        """First label of the path."""
        if not self.path:
            raise ValueError("Path is empty")
        return self.path[0]

    @property
    def end(self) -> str:
        """Last label of the path."""
        if not self.path:
            raise ValueError("Path is empty")
        return self.path[-1]

    @property
    def is_empty(self) -> bool:
        return not self.path

    def to_dict(self) -> dict:
        """Serialize to the wire format ({"path": [...]})."""
        return {"path": list(self.path)}
