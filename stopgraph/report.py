"""Text and JSON rendering of distance matrices and path listings.

Nothing here performs I/O; callers decide where the strings go.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from stopgraph.config import DISPLAY_CONFIG, DisplayConfig
from stopgraph.graph import StopGraph
from stopgraph.paths import path_distances


def format_matrix(
    graph: StopGraph,
    width: Optional[int] = None,
    config: DisplayConfig = DISPLAY_CONFIG,
) -> str:
    """Render the adjacency matrix with stop indices on both axes.

    Args:
        graph: Graph to render.
        width: Column width. Defaults to ``config.column_width`` widened to
            fit the largest value.
        config: Layout settings.

    Returns:
        Multi-line string: separator, header row, then one row per stop.
    """
    if width is None:
        width = config.column_width_for(graph)
    label = config.label_width

    lines = [config.separator()]
    lines.append(" " * label + "".join(f"{i:>{width}d}" for i in range(len(graph))))
    for idx, row in enumerate(graph.to_lists()):
        lines.append(f"{idx:<{label}d}" + "".join(f"{v:>{width}d}" for v in row))
    return "\n".join(lines)


def format_path(path: Sequence[int]) -> str:
    """Render a path as ``[0, 4, 7]``."""
    return str(list(path))


def format_path_listing(
    graph: StopGraph,
    source: int,
    target: int,
    paths: Sequence[Sequence[int]],
    config: DisplayConfig = DISPLAY_CONFIG,
) -> str:
    """Render the result of a route query the way the menu prints it."""
    if not paths:
        return f"No paths found between bus stop {source} and bus stop {target}"

    lines = ["", f"All paths between bus stop {source} and bus stop {target}:"]
    lines.extend(format_path(p) for p in paths)
    lines.append("")
    lines.append("Distances of all paths:")
    for path, dist in path_distances(graph, paths):
        lines.append(f"Total distance for path {format_path(path)}: {dist}")
        lines.append(config.separator())
    return "\n".join(lines)


def paths_to_dict(
    graph: StopGraph, source: int, target: int, paths: Sequence[Sequence[int]]
) -> Dict[str, Any]:
    """Return a JSON-ready summary of a route query."""
    entries: List[Dict[str, Any]] = [
        {"path": list(path), "distance": dist}
        for path, dist in path_distances(graph, paths)
    ]
    return {"source": source, "target": target, "count": len(entries), "paths": entries}
