"""Exhaustive simple-path enumeration over a ``StopGraph``.

Paths are found by depth-first search with backtracking. Each query owns its
``visited`` flags and current path buffer, so the graph is only read and
several queries may run against one fully-built graph.

Neighbours are explored in ascending index order, which fixes the order in
which paths are reported. Results are not sorted afterwards.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from stopgraph.errors import InvalidArgument
from stopgraph.graph import StopGraph
from stopgraph.logging import get_logger

logger = get_logger(__name__)

Path = Tuple[int, ...]


def iter_all_paths(graph: StopGraph, source: int, target: int) -> Iterator[Path]:
    """Yield every simple path from ``source`` to ``target``.

    Indices are validated before the generator is returned, so a bad query
    fails at call time rather than on first iteration.

    Args:
        graph: Graph to search. It is never modified.
        source: Starting stop index.
        target: Destination stop index.

    Returns:
        Iterator over paths in depth-first discovery order.

    Raises:
        OutOfRange: If ``source`` or ``target`` is not a valid stop.
    """
    # distance() validates both indices and raises OutOfRange
    graph.distance(source, target)
    return _enumerate(graph, int(source), int(target))


def _enumerate(graph: StopGraph, source: int, target: int) -> Iterator[Path]:
    visited = [False] * graph.vertex_count
    current: List[int] = []

    def visit(stop: int) -> Iterator[Path]:
        visited[stop] = True
        current.append(stop)
        try:
            if stop == target:
                yield tuple(current)
            else:
                for neighbor in graph.neighbors(stop):
                    if not visited[neighbor]:
                        yield from visit(neighbor)
        finally:
            # Backtrack on exhaustion and on early close() alike
            visited[stop] = False
            current.pop()

    yield from visit(source)


def find_all_paths(graph: StopGraph, source: int, target: int) -> List[Path]:
    """Return every simple path from ``source`` to ``target``.

    ``source == target`` yields the single path ``(source,)``. An empty list
    means the stops are not connected; it is not an error.

    Example:
        >>> g = StopGraph.from_edges(3, [(0, 1, 2), (1, 2, 3), (0, 2, 9)])
        >>> find_all_paths(g, 0, 2)
        [(0, 1, 2), (0, 2)]

    Raises:
        OutOfRange: If ``source`` or ``target`` is not a valid stop.
    """
    paths = list(iter_all_paths(graph, source, target))
    logger.debug("Found %d path(s) from stop %s to stop %s", len(paths), source, target)
    return paths


def total_distance(graph: StopGraph, path: Sequence[int]) -> int:
    """Return the sum of edge weights between consecutive stops of ``path``.

    A single-stop path has total distance ``0``.

    Raises:
        InvalidArgument: If ``path`` is empty.
    """
    if len(path) == 0:
        raise InvalidArgument("path must contain at least one stop")
    return sum(graph.distance(a, b) for a, b in zip(path, path[1:]))


def path_distances(
    graph: StopGraph, paths: Sequence[Sequence[int]]
) -> List[Tuple[Path, int]]:
    """Pair each path with its total distance, preserving order."""
    return [(tuple(p), total_distance(graph, p)) for p in paths]
