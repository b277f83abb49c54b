"""
Chain Algorithm Adapter - Bridge between architecture and algorithm.

Wraps flight_graph's predecessor walk with duplicate-destination
handling and converts its output to a FlightPath schema object.
"""

import logging
from typing import Optional, Sequence

from flight_graph import AmbiguousPredecessorError, reconstruct_from_segments

from flight_tracker.ports.path_finder import PathFinder
from flight_tracker.schemas.path import FlightPath, PathMode
from flight_tracker.schemas.segment import Segment

logger = logging.getLogger(__name__)


class ChainPathFinder(PathFinder):
    """
    Backward walk from the first segment's origin through predecessor links.

    The walk assumes each label is the destination of at most one segment.
    When that does not hold the later segment wins; by default the
    overwrite is logged as a warning, in strict mode it rejects the batch.

    Attributes:
        _strict: Raise AmbiguousPredecessorError on duplicate destinations.
        _max_steps: Optional cap on backward steps per walk.
    """

    def __init__(self, strict: bool = False, max_steps: Optional[int] = None) -> None:
        """
        Initialize the chain path finder.

        Args:
            strict: If True, a destination reached by two segments raises
                AmbiguousPredecessorError instead of logging a warning.
            max_steps: Maximum backward steps before UnboundedWalkError.
                None means only the revisit check applies.
        """
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {max_steps}")
        self._strict = strict
        self._max_steps = max_steps

    @property
    def mode(self) -> PathMode:
        return PathMode.CHAIN

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Predecessor Chain Reconstruction"

    @property
    def strict(self) -> bool:
        return self._strict

    def find_path(self, segments: Sequence[Segment]) -> FlightPath:
        """
        Reconstruct the chain for the batch.

        Raises:
            EmptyBatchError: If the batch is empty.
            UnboundedWalkError: If predecessor links form a cycle.
            AmbiguousPredecessorError: In strict mode, on a duplicate destination.
        """
        path = reconstruct_from_segments(
            segments,
            max_steps=self._max_steps,
            on_overwrite=self._on_overwrite,
        )
        return FlightPath(
            path=tuple(path),
            mode=self.mode,
            segment_count=len(segments),
        )

    def _on_overwrite(self, destination: str, previous: str, new: str) -> None:
        if self._strict:
            raise AmbiguousPredecessorError(destination, previous, new)
        logger.warning(
            "Destination %s reached from both %s and %s; keeping %s",
            destination,
            previous,
            new,
            new,
        )
