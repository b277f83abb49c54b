"""
Path Finder port interface.

Defines the abstract contract for path derivation algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from flight_tracker.schemas.path import FlightPath, PathMode
    from flight_tracker.schemas.segment import Segment


class PathFinder(ABC):
    """
    Abstract interface for path derivation algorithms.

    Implementations receive a validated batch and build every lookup
    structure they need from it. Nothing is retained between calls, so
    a single instance can serve concurrent requests.

    Implementations:
    - TraversalPathFinder: multi-source depth-first visitation order
    - ChainPathFinder: backward predecessor walk from the first origin
    """

    @abstractmethod
    def find_path(self, segments: Sequence[Segment]) -> FlightPath:
        """
        Derive a path from the batch.

        Args:
            segments: Ordered batch of segments.

        Returns:
            FlightPath for this batch.
        """
        ...

    @property
    @abstractmethod
    def mode(self) -> PathMode:
        """Path mode this finder implements."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
