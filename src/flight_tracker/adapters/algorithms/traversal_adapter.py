"""
Traversal Algorithm Adapter - Bridge between architecture and algorithm.

Wraps flight_graph's depth-first traversal and converts its output
to a FlightPath schema object.
"""

import logging
from typing import Sequence

from flight_graph import build_adjacency, traverse

from flight_tracker.ports.path_finder import PathFinder
from flight_tracker.schemas.path import FlightPath, PathMode
from flight_tracker.schemas.segment import Segment

logger = logging.getLogger(__name__)


class TraversalPathFinder(PathFinder):
    """
    Visitation order over every connected component of the batch.

    An empty batch yields an empty path.
    """

    @property
    def mode(self) -> PathMode:
        return PathMode.TRAVERSAL

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Multi-Source Depth-First Traversal"

    def find_path(self, segments: Sequence[Segment]) -> FlightPath:
        graph = build_adjacency(segments)

        logger.debug(
            "Adjacency graph built: %d origins from %d segments",
            len(graph),
            len(segments),
        )

        path = traverse(graph)
        return FlightPath(
            path=tuple(path),
            mode=self.mode,
            segment_count=len(segments),
        )
