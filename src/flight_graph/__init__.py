"""
Path derivation core for flight segment batches.

Pure functions only: no I/O and no dependency on the HTTP layer.
"""

from .exceptions import (
    AmbiguousPredecessorError,
    DecodeError,
    EmptyBatchError,
    FlightGraphError,
    InvalidSegmentError,
    UnboundedWalkError,
    ValidationError,
)
from .graph import (
    AdjacencyGraph,
    PredecessorMap,
    build_adjacency,
    build_predecessors,
    collect_labels,
)
from .reconstruction import reconstruct_chain, reconstruct_from_segments
from .traversal import reachable_labels, traverse
from .validation import validate_batch_not_empty, validate_segments

__all__ = [
    # Exceptions
    "FlightGraphError",
    "ValidationError",
    "DecodeError",
    "InvalidSegmentError",
    "EmptyBatchError",
    "AmbiguousPredecessorError",
    "UnboundedWalkError",
    # Graph builder
    "AdjacencyGraph",
    "PredecessorMap",
    "build_adjacency",
    "build_predecessors",
    "collect_labels",
    # Algorithms
    "traverse",
    "reachable_labels",
    "reconstruct_chain",
    "reconstruct_from_segments",
    # Validation
    "validate_segments",
    "validate_batch_not_empty",
]
