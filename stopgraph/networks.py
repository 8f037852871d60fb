"""Built-in sample networks."""

from __future__ import annotations

from typing import List, Tuple

from stopgraph.graph import StopGraph
from stopgraph.io import StopNetwork

# Ten-stop campus bus map: (stop, stop, distance)
USM_STOP_COUNT = 10
USM_ROUTES: List[Tuple[int, int, int]] = [
    (0, 1, 13),
    (0, 3, 4),
    (0, 4, 5),
    (3, 2, 12),
    (4, 7, 21),
    (4, 1, 7),
    (2, 8, 24),
    (2, 7, 27),
    (7, 5, 14),
    (5, 6, 11),
    (1, 5, 20),
    (2, 9, 8),
]


def build_usm_network() -> StopNetwork:
    """Return a fresh copy of the ten-stop campus bus network."""
    return StopNetwork(StopGraph.from_edges(USM_STOP_COUNT, USM_ROUTES))
