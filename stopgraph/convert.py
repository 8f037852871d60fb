"""Conversion between ``StopGraph`` and NetworkX graphs.

Example:
    >>> import networkx as nx
    >>> from stopgraph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("Library", "Hostel", distance=13)
    >>> network = from_networkx(G)
    >>> to_networkx(network.graph, network.names).edges["Library", "Hostel"]
    {'distance': 13}
"""

from __future__ import annotations

import numbers
from typing import Any, Optional, Sequence

import networkx as nx

from stopgraph.errors import InvalidArgument
from stopgraph.graph import StopGraph
from stopgraph.io import StopNetwork


def to_networkx(
    graph: StopGraph, names: Optional[Sequence[str]] = None, weight: str = "distance"
) -> nx.Graph:
    """Convert a ``StopGraph`` to an undirected ``networkx.Graph``.

    Args:
        graph: Graph to convert.
        names: Optional node labels, index-aligned. Defaults to integer indices.
        weight: Edge attribute name that receives the distance.

    Returns:
        A NetworkX graph with one node per stop (including isolated stops).
    """
    if names is not None and len(names) != graph.vertex_count:
        raise InvalidArgument(
            f"Expected {graph.vertex_count} names, got {len(names)}"
        )
    labels = list(names) if names is not None else list(range(graph.vertex_count))

    nx_graph = nx.Graph()
    nx_graph.add_nodes_from(labels)
    for u, v, w in graph.edges():
        nx_graph.add_edge(labels[u], labels[v], **{weight: w})
    return nx_graph


def _integral_weight(value: Any, u: Any, v: Any, weight: str) -> int:
    """Return ``value`` as an int, refusing fractional distances."""
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise InvalidArgument(f"Edge {u!r}-{v!r} has non-integer {weight} {value!r}")


def from_networkx(nx_graph: nx.Graph, weight: str = "distance") -> StopNetwork:
    """Convert an undirected NetworkX graph to a ``StopNetwork``.

    Nodes are indexed in ``nx_graph.nodes`` order. Edges without ``weight``
    get distance ``1``.

    Raises:
        InvalidArgument: If the graph is directed or empty, or an edge has a
            fractional distance or distance ``0`` (which would be
            indistinguishable from no edge).
    """
    if nx_graph.is_directed():
        raise InvalidArgument("Only undirected graphs can be converted")

    labels = list(nx_graph.nodes)
    index = {label: i for i, label in enumerate(labels)}
    graph = StopGraph(len(labels))
    for u, v, data in nx_graph.edges(data=True):
        w = _integral_weight(data.get(weight, 1), u, v, weight)
        if w == 0:
            raise InvalidArgument(f"Edge {u!r}-{v!r} has zero {weight}")
        graph.add_edge(index[u], index[v], w)
    return StopNetwork(graph, [str(label) for label in labels])
