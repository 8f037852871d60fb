"""stopgraph: all-routes finder for small bus networks.

A network is a fixed set of numbered stops joined by roads with integer
distances, stored as a dense adjacency matrix. The package lists the distance
matrix and enumerates every simple path between two stops with its total
distance.

Primary API:
    StopGraph - Weighted undirected adjacency-matrix graph
    find_all_paths() - Every simple path between two stops
    total_distance() - Sum of edge weights along a path
    StopNetwork, load_network_file() - Named networks from YAML

Example:
    from stopgraph import StopGraph, find_all_paths, total_distance

    g = StopGraph(4)
    g.add_edge(0, 1, 13)
    g.add_edge(1, 2, 7)
    g.add_edge(0, 3, 4)
    g.add_edge(3, 2, 12)

    for path in find_all_paths(g, 0, 2):
        print(path, total_distance(g, path))
"""

from __future__ import annotations

from stopgraph import cli, logging
from stopgraph._version import __version__
from stopgraph.convert import from_networkx, to_networkx
from stopgraph.errors import InvalidArgument, OutOfRange, StopGraphError
from stopgraph.graph import StopGraph
from stopgraph.io import (
    StopNetwork,
    dump_network_yaml,
    load_network_file,
    load_network_yaml,
    network_from_dict,
    network_to_dict,
)
from stopgraph.networks import build_usm_network
from stopgraph.paths import (
    Path,
    find_all_paths,
    iter_all_paths,
    path_distances,
    total_distance,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "StopGraph",
    "Path",
    "find_all_paths",
    "iter_all_paths",
    "total_distance",
    "path_distances",
    # Errors
    "StopGraphError",
    "InvalidArgument",
    "OutOfRange",
    # Networks
    "StopNetwork",
    "build_usm_network",
    "load_network_file",
    "load_network_yaml",
    "dump_network_yaml",
    "network_from_dict",
    "network_to_dict",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
