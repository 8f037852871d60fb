"""Shared fixtures for stopgraph tests."""

from __future__ import annotations

import pytest

from stopgraph.graph import StopGraph
from stopgraph.networks import build_usm_network


@pytest.fixture
def usm_graph() -> StopGraph:
    # Ten-stop campus map, stop: neighbours(distance)
    #   0: 1(13) 3(4) 4(5)        5: 1(20) 6(11) 7(14)
    #   1: 0(13) 4(7) 5(20)       6: 5(11)
    #   2: 3(12) 7(27) 8(24) 9(8) 7: 2(27) 4(21) 5(14)
    #   3: 0(4) 2(12)             8: 2(24)
    #   4: 0(5) 1(7) 7(21)        9: 2(8)
    return build_usm_network().graph


@pytest.fixture
def square() -> StopGraph:
    #  0 ──1── 1
    #  │       │
    #  4       2
    #  │       │
    #  3 ──3── 2
    return StopGraph.from_edges(4, [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4)])
