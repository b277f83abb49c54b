"""
Algorithm adapters for path derivation.
"""

from flight_tracker.adapters.algorithms.chain_adapter import ChainPathFinder
from flight_tracker.adapters.algorithms.traversal_adapter import (
    TraversalPathFinder,
)

__all__ = [
    "ChainPathFinder",
    "TraversalPathFinder",
]
