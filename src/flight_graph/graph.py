"""
Graph construction for flight segments.

Builds the two lookup structures used by the path algorithms:
an adjacency graph (origin -> destinations) and a predecessor map
(destination -> origin). Both are built in a single pass over the batch.
"""

from typing import Callable, Dict, Iterable, List, Optional, Protocol


class SegmentLike(Protocol):
    """Anything exposing an origin and a destination label."""

    source: str
    destination: str


AdjacencyGraph = Dict[str, List[str]]
PredecessorMap = Dict[str, str]

# (destination, previous origin, new origin)
OverwriteCallback = Callable[[str, str, str], None]


def build_adjacency(segments: Iterable[SegmentLike]) -> AdjacencyGraph:
    """
    Build the origin -> destinations adjacency graph.

    Destinations are appended in batch order with no deduplication.
    Key order is the order in which each label first appears as an origin.

    Args:
        segments: Ordered batch of segments.

    Returns:
        Dict mapping each origin to its list of destinations.
    """
    graph: AdjacencyGraph = {}
    for segment in segments:
        graph.setdefault(segment.source, []).append(segment.destination)
    return graph


def build_predecessors(
    segments: Iterable[SegmentLike],
    on_overwrite: Optional[OverwriteCallback] = None,
) -> PredecessorMap:
    """
    Build the destination -> origin predecessor map.

    Later segments overwrite earlier ones for the same destination
    (last write wins). If ``on_overwrite`` is given it is called before
    each overwrite and may raise to reject the batch.

    Args:
        segments: Ordered batch of segments.
        on_overwrite: Optional hook called as (destination, previous, new).

    Returns:
        Dict mapping each destination to its (last seen) origin.
    """
    predecessors: PredecessorMap = {}
    for segment in segments:
        previous = predecessors.get(segment.destination)
        if previous is not None and on_overwrite is not None:
            on_overwrite(segment.destination, previous, segment.source)
        predecessors[segment.destination] = segment.source
    return predecessors


def collect_labels(segments: Iterable[SegmentLike]) -> List[str]:
    """Return every distinct label in order of first appearance."""
    seen: Dict[str, None] = {}
    for segment in segments:
        seen.setdefault(segment.source, None)
        seen.setdefault(segment.destination, None)
    return list(seen)
