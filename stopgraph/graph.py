"""Fixed-size weighted undirected graph over a dense adjacency matrix.

``StopGraph`` stores one integer weight per unordered pair of stops. A weight
of ``0`` means "no direct road", and the diagonal is always ``0``. The vertex
count is fixed at construction and the only mutation is edge insertion.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

import numpy as np

from stopgraph.errors import InvalidArgument, OutOfRange
from stopgraph.logging import get_logger

logger = get_logger(__name__)

EdgeTuple = Tuple[int, int, int]

_WEIGHT_LIMITS = np.iinfo(np.int64)


def _as_index(value: object, what: str) -> int:
    """Return ``value`` as a plain int, rejecting bools and non-integers."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return int(value)


class StopGraph:
    """Weighted undirected graph of ``vertex_count`` stops.

    Invariants:
      - ``distance(u, v) == distance(v, u)`` for all stops.
      - ``distance(u, u) == 0`` for all stops.

    Example:
        >>> g = StopGraph(3)
        >>> g.add_edge(0, 1, 13)
        >>> g.distance(1, 0)
        13
    """

    def __init__(self, vertex_count: int) -> None:
        """Create a graph with ``vertex_count`` stops and no edges.

        Args:
            vertex_count: Number of stops. Must be positive.

        Raises:
            InvalidArgument: If ``vertex_count <= 0``.
            TypeError: If ``vertex_count`` is not an integer.
        """
        n = _as_index(vertex_count, "vertex_count")
        if n <= 0:
            raise InvalidArgument(f"vertex_count must be positive, got {n}")
        self._n = n
        self._edges = np.zeros((n, n), dtype=np.int64)

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[EdgeTuple]) -> StopGraph:
        """Build a graph and insert ``(u, v, weight)`` triples in order."""
        graph = cls(vertex_count)
        for u, v, weight in edges:
            graph.add_edge(u, v, weight)
        return graph

    @property
    def vertex_count(self) -> int:
        """Number of stops, fixed at construction."""
        return self._n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"StopGraph(vertex_count={self._n}, edges={self.edge_count})"

    def _check(self, idx: object, what: str = "stop") -> int:
        i = _as_index(idx, what)
        if not 0 <= i < self._n:
            raise OutOfRange(f"{what} {i} is outside [0, {self._n})")
        return i

    #
    # Mutation
    #
    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Set the weight between ``u`` and ``v`` in both directions.

        Re-adding an edge overwrites the previous weight. A weight of ``0``
        removes the edge. Self-loops are ignored so the diagonal stays zero.

        Args:
            u: First stop index.
            v: Second stop index.
            weight: Integer distance between the stops.

        Raises:
            OutOfRange: If either index is outside ``[0, vertex_count)``.
            InvalidArgument: If ``weight`` is outside the int64 range.
        """
        u = self._check(u, "u")
        v = self._check(v, "v")
        w = _as_index(weight, "weight")
        if not _WEIGHT_LIMITS.min <= w <= _WEIGHT_LIMITS.max:
            raise InvalidArgument(
                f"weight {w} does not fit in a 64-bit signed integer"
            )
        if u == v:
            if w != 0:
                logger.warning("Ignoring self-loop on stop %d (weight %d)", u, w)
            return
        previous = int(self._edges[u, v])
        if previous and previous != w:
            logger.debug("Overwriting edge %d-%d: %d -> %d", u, v, previous, w)
        self._edges[u, v] = w
        self._edges[v, u] = w

    #
    # Queries
    #
    def distance(self, u: int, v: int) -> int:
        """Return the edge weight between ``u`` and ``v``.

        Returns ``0`` both when ``u == v`` and when there is no direct edge.

        Raises:
            OutOfRange: If either index is outside ``[0, vertex_count)``.
        """
        return int(self._edges[self._check(u, "u"), self._check(v, "v")])

    def has_edge(self, u: int, v: int) -> bool:
        """Return True if ``u`` and ``v`` are directly connected."""
        return self.distance(u, v) != 0

    def neighbors(self, u: int) -> List[int]:
        """Return stops adjacent to ``u`` in ascending index order."""
        row = self._edges[self._check(u, "u")]
        return [int(n) for n in np.flatnonzero(row)]

    def edges(self) -> Iterator[EdgeTuple]:
        """Yield each edge once as ``(u, v, weight)`` with ``u < v``."""
        rows, cols = np.nonzero(np.triu(self._edges, k=1))
        for u, v in zip(rows, cols):
            yield int(u), int(v), int(self._edges[u, v])

    @property
    def edge_count(self) -> int:
        """Number of undirected edges."""
        return int(np.count_nonzero(np.triu(self._edges, k=1)))

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the adjacency matrix."""
        view = self._edges.view()
        view.flags.writeable = False
        return view

    def to_lists(self) -> List[List[int]]:
        """Return a copy of the adjacency matrix as nested Python lists."""
        return self._edges.tolist()
