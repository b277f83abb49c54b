"""
Flight Path Service - Domain orchestrator for path derivation.

Coordinates the interaction between:
- Input validation (flight_graph.validation)
- PathFinder adapters (one per PathMode)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Dict, Iterable, List, Sequence, Union

from flight_graph import validate_segments

from flight_tracker.schemas.path import FlightPath, PathMode

if TYPE_CHECKING:
    from flight_tracker.ports.path_finder import PathFinder
    from flight_tracker.schemas.segment import Segment

logger = logging.getLogger(__name__)


class FlightPathService:
    """
    Domain service for deriving paths from segment batches.

    Orchestrates one calculation:
    1. Validates the batch
    2. Dispatches to the PathFinder registered for the mode
    3. Logs performance metrics

    This service is stateless and thread-safe.

    Attributes:
        _finders: PathFinder adapters keyed by the mode they implement.
    """

    def __init__(self, finders: Iterable[PathFinder]) -> None:
        """
        Initialize the service.

        Args:
            finders: Path finder adapters. Later finders replace earlier
                ones registered for the same mode.

        Raises:
            ValueError: If no finders are given.
        """
        self._finders: Dict[PathMode, PathFinder] = {}
        for finder in finders:
            self._finders[finder.mode] = finder
        if not self._finders:
            raise ValueError("At least one PathFinder is required")

    def calculate(
        self,
        segments: Sequence[Segment],
        mode: Union[PathMode, str] = PathMode.TRAVERSAL,
    ) -> FlightPath:
        """
        Derive a path from the batch using the requested mode.

        Args:
            segments: Ordered batch of segments.
            mode: PathMode or its string value.

        Returns:
            FlightPath produced by the mode's finder.

        Raises:
            ValueError: If no finder is registered for the mode.
            InvalidSegmentError: If a segment has a missing or empty label.
            EmptyBatchError: Chain mode on an empty batch.
            UnboundedWalkError: Chain mode on cyclic predecessor links.
        """
        start_time = time.perf_counter()

        finder = self._finder_for(PathMode(mode))
        validate_segments(segments)

        result = finder.find_path(segments)

        total_time = time.perf_counter() - start_time
        logger.info(
            "Path calculation completed (%s): %d labels from %d segments in %.3fms",
            finder.mode.value,
            result.length,
            result.segment_count,
            total_time * 1000,
        )

        return result

    def _finder_for(self, mode: PathMode) -> PathFinder:
        try:
            return self._finders[mode]
        except KeyError:
            raise ValueError(f"No path finder registered for mode '{mode.value}'") from None

    @property
    def modes(self) -> List[PathMode]:
        """Modes this service can calculate."""
        return list(self._finders)

    @property
    def algorithm_names(self) -> List[str]:
        """Names of the registered algorithms."""
        return [finder.name for finder in self._finders.values()]
