"""
Multi-source depth-first traversal of an adjacency graph.

Visits every label reachable from every origin and records the
visitation order as a single path across all connected components.
"""

from typing import Iterator, List, Set

from .graph import AdjacencyGraph


def traverse(graph: AdjacencyGraph) -> List[str]:
    """
    Visit the whole graph depth-first, one component at a time.

    Origins are taken in the graph's key order, which for graphs built by
    ``build_adjacency`` is the order each label first appeared as an origin.
    Every origin not already visited starts a new descent.

    Args:
        graph: Origin -> destinations mapping.

    Returns:
        Labels in visitation order. Each label appears at most once.
    """
    visited: Set[str] = set()
    path: List[str] = []

    for origin in graph:
        if origin not in visited:
            _descend(graph, origin, visited, path)

    return path


def _descend(
    graph: AdjacencyGraph,
    start: str,
    visited: Set[str],
    path: List[str],
) -> None:
    """
    Depth-first descent from ``start``.

    Equivalent to the recursive definition (visit, then recurse into each
    unvisited destination in list order) but keeps its own stack so long
    chains do not hit the recursion limit.
    """
    _visit(start, visited, path)
    stack: List[Iterator[str]] = [iter(graph.get(start, ()))]

    while stack:
        for destination in stack[-1]:
            if destination not in visited:
                _visit(destination, visited, path)
                stack.append(iter(graph.get(destination, ())))
                break
        else:
            stack.pop()


def _visit(label: str, visited: Set[str], path: List[str]) -> None:
    visited.add(label)
    path.append(label)


def reachable_labels(graph: AdjacencyGraph) -> Set[str]:
    """
    Every label reachable from some origin, origins included.

    Order-free counterpart of ``traverse``: the path it returns holds
    exactly these labels.
    """
    reached: Set[str] = set()
    pending: List[str] = list(graph)

    while pending:
        label = pending.pop()
        if label in reached:
            continue
        reached.add(label)
        pending.extend(graph.get(label, ()))

    return reached
