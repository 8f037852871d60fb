"""Loading and dumping stop networks as YAML or plain dictionaries.

A network document has two keys::

    stops: 10                    # stop count, or a list of stop names
    routes:
      - [0, 1, 13]               # [source, target, distance]
      - {source: 3, target: 2, distance: 12}

When ``stops`` is a list of names, routes may refer to stops by name or by
index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from stopgraph.errors import InvalidArgument, OutOfRange
from stopgraph.graph import StopGraph
from stopgraph.logging import get_logger

logger = get_logger(__name__)

StopRef = Union[int, str]


@dataclass
class StopNetwork:
    """A ``StopGraph`` together with display names for its stops.

    Attributes:
        graph: The underlying adjacency-matrix graph.
        names: One name per stop, index-aligned. Defaults to ``"0".."N-1"``.
    """

    graph: StopGraph
    names: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.names:
            self.names = [str(i) for i in range(self.graph.vertex_count)]
        if len(self.names) != self.graph.vertex_count:
            raise InvalidArgument(
                f"Expected {self.graph.vertex_count} stop names, got {len(self.names)}"
            )
        if len(set(self.names)) != len(self.names):
            raise InvalidArgument("Stop names must be unique")

    def name_of(self, index: int) -> str:
        """Return the display name of stop ``index``."""
        if not 0 <= index < len(self.names):
            raise OutOfRange(f"stop {index} is outside [0, {len(self.names)})")
        return self.names[index]

    def index_of(self, stop: StopRef) -> int:
        """Resolve a stop given by name or index to its index.

        Strings that are not names but parse as integers are taken as indices,
        which lets CLI arguments use either form.
        """
        if isinstance(stop, str):
            if stop in self.names:
                return self.names.index(stop)
            try:
                stop = int(stop)
            except ValueError:
                raise InvalidArgument(f"Unknown stop '{stop}'") from None
        if isinstance(stop, bool) or not isinstance(stop, int):
            raise InvalidArgument(f"Stop reference must be a name or index: {stop!r}")
        if not 0 <= stop < len(self.names):
            raise OutOfRange(f"stop {stop} is outside [0, {len(self.names)})")
        return stop


def _parse_route(entry: Any, network: StopNetwork) -> tuple:
    if isinstance(entry, dict):
        missing = {"source", "target", "distance"} - set(entry)
        if missing:
            raise InvalidArgument(
                f"Route {entry!r} is missing key(s): {', '.join(sorted(missing))}"
            )
        extra = set(entry) - {"source", "target", "distance"}
        if extra:
            raise InvalidArgument(
                f"Unrecognized key(s) in route {entry!r}: {', '.join(sorted(extra))}"
            )
        src, dst, dist = entry["source"], entry["target"], entry["distance"]
    elif isinstance(entry, (list, tuple)) and len(entry) == 3:
        src, dst, dist = entry
    else:
        raise InvalidArgument(
            f"Each route must be [source, target, distance] or a mapping, got {entry!r}"
        )
    if isinstance(dist, bool) or not isinstance(dist, int):
        raise InvalidArgument(f"Route distance must be an integer, got {dist!r}")
    return network.index_of(src), network.index_of(dst), dist


def network_from_dict(data: Dict[str, Any]) -> StopNetwork:
    """Build a ``StopNetwork`` from a parsed network document.

    Raises:
        InvalidArgument: If the document shape is wrong.
        OutOfRange: If a route refers to a stop index that does not exist.
    """
    if not isinstance(data, dict):
        raise InvalidArgument("The network description must be a mapping at top-level.")

    unknown = set(data) - {"stops", "routes"}
    if unknown:
        raise InvalidArgument(
            f"Unrecognized top-level key(s): {', '.join(sorted(map(str, unknown)))}"
        )
    if "stops" not in data:
        raise InvalidArgument("Missing required key 'stops'")

    stops = data["stops"]
    if isinstance(stops, list):
        names = [str(s) for s in stops]
        network = StopNetwork(StopGraph(len(names)), names)
    elif isinstance(stops, int) and not isinstance(stops, bool):
        network = StopNetwork(StopGraph(stops))
    else:
        raise InvalidArgument("'stops' must be a positive integer or a list of names")

    routes = data.get("routes") or []
    if not isinstance(routes, list):
        raise InvalidArgument("'routes' must be a list")
    for entry in routes:
        network.graph.add_edge(*_parse_route(entry, network))

    logger.debug(
        "Loaded network with %d stops and %d routes",
        network.graph.vertex_count,
        network.graph.edge_count,
    )
    return network


def network_to_dict(network: StopNetwork) -> Dict[str, Any]:
    """Return a document that ``network_from_dict`` turns back into ``network``.

    Stop names are written only when they differ from the default indices.
    """
    default_names = [str(i) for i in range(network.graph.vertex_count)]
    stops: Union[int, List[str]] = (
        network.graph.vertex_count
        if network.names == default_names
        else list(network.names)
    )
    return {
        "stops": stops,
        "routes": [[u, v, w] for u, v, w in network.graph.edges()],
    }


def load_network_yaml(yaml_str: str) -> StopNetwork:
    """Parse a YAML network document."""
    data = yaml.safe_load(yaml_str)
    if data is None:
        raise InvalidArgument("The network description is empty.")
    return network_from_dict(data)


def load_network_file(path: Union[str, Path]) -> StopNetwork:
    """Read and parse a YAML network file."""
    path = Path(path)
    logger.info("Loading network from %s", path)
    return load_network_yaml(path.read_text(encoding="utf-8"))


def dump_network_yaml(network: StopNetwork) -> str:
    """Serialize ``network`` to a YAML document."""
    return yaml.safe_dump(network_to_dict(network), sort_keys=False)
