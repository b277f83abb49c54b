"""
Itinerary reconstruction by walking predecessor links.

Starting from a label, follows destination -> origin links backward
until a label with no predecessor is reached.
"""

from typing import List, Optional, Sequence, Set

from .exceptions import UnboundedWalkError
from .graph import OverwriteCallback, PredecessorMap, SegmentLike, build_predecessors
from .validation import validate_batch_not_empty


def reconstruct_chain(
    predecessors: PredecessorMap,
    start: str,
    max_steps: Optional[int] = None,
) -> List[str]:
    """
    Walk backward from ``start`` through the predecessor map.

    Returns:
        Path beginning with ``start``; the last element is the earliest
        label reached (it has no predecessor).

    Raises:
        UnboundedWalkError: If a label would be visited twice, or the walk
            would take more than ``max_steps`` backward steps.
    """
    path: List[str] = [start]
    seen: Set[str] = {start}
    current = start

    while current in predecessors:
        previous = predecessors[current]
        if previous in seen:
            raise UnboundedWalkError(previous, path)
        if max_steps is not None and len(path) > max_steps:
            raise UnboundedWalkError(previous, path, max_steps=max_steps)
        path.append(previous)
        seen.add(previous)
        current = previous

    return path


def reconstruct_from_segments(
    segments: Sequence[SegmentLike],
    max_steps: Optional[int] = None,
    on_overwrite: Optional[OverwriteCallback] = None,
) -> List[str]:
    """
    Reconstruct the chain for a batch, starting at the first segment's origin.

    Raises:
        EmptyBatchError: If the batch has no segments.
        UnboundedWalkError: If the predecessor links form a cycle.
    """
    validate_batch_not_empty(segments)
    predecessors = build_predecessors(segments, on_overwrite=on_overwrite)
    return reconstruct_chain(predecessors, segments[0].source, max_steps=max_steps)
