"""
CalculateFlightPath Use Case - Public API for path derivation.

This module provides the main entry point for the flight path tracker.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from flight_tracker.adapters.algorithms.chain_adapter import ChainPathFinder
from flight_tracker.adapters.algorithms.traversal_adapter import TraversalPathFinder
from flight_tracker.adapters.providers.static_provider import StaticSegmentProvider
from flight_tracker.config import Settings
from flight_tracker.ports.segment_provider import SegmentProvider
from flight_tracker.schemas.path import FlightPath, PathMode
from flight_tracker.schemas.segment import Segment
from flight_tracker.services.path_service import FlightPathService

logger = logging.getLogger(__name__)


class CalculateFlightPath:
    """
    Public API for deriving flight paths.

    Example usage:
        >>> tracker = CalculateFlightPath()
        >>> result = tracker.traverse([
        ...     Segment("SFO", "EWR"),
        ...     Segment("ATL", "EWR"),
        ...     Segment("SFO", "ATL"),
        ... ])
        >>> result.path
        ('SFO', 'EWR', 'ATL')

    Attributes:
        _service: Underlying FlightPathService.
        _sample_provider: Provider behind sample_flights().
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        sample_provider: Optional[SegmentProvider] = None,
    ) -> None:
        """
        Initialize the tracker with optional custom dependencies.

        Args:
            settings: Chain policy source. Defaults to Settings() (lenient,
                no step budget).
            sample_provider: Source for sample_flights(). Defaults to the
                static illustrative list.
        """
        settings = settings or Settings()

        self._service = FlightPathService(
            finders=[
                TraversalPathFinder(),
                ChainPathFinder(
                    strict=settings.strict_chain,
                    max_steps=settings.max_chain_steps,
                ),
            ]
        )
        self._sample_provider = sample_provider or StaticSegmentProvider()

        logger.info(
            "CalculateFlightPath initialized with %s (strict chain: %s)",
            ", ".join(self._service.algorithm_names),
            settings.strict_chain,
        )

    def calculate(
        self,
        segments: Sequence[Segment],
        mode: Union[PathMode, str] = PathMode.TRAVERSAL,
    ) -> FlightPath:
        """Derive a path in the given mode."""
        return self._service.calculate(segments, mode)

    def traverse(self, segments: Sequence[Segment]) -> FlightPath:
        """Visitation order over every component of the batch."""
        return self._service.calculate(segments, PathMode.TRAVERSAL)

    def chain(self, segments: Sequence[Segment]) -> FlightPath:
        """Backward itinerary walk from the first segment's origin."""
        return self._service.calculate(segments, PathMode.CHAIN)

    def sample_flights(self) -> List[Segment]:
        """Illustrative segment list served by the `flights` operation."""
        return self._sample_provider.get_segments()

    @property
    def algorithm_names(self) -> List[str]:
        """Names of the available algorithms."""
        return self._service.algorithm_names
