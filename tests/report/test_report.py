from stopgraph.config import DisplayConfig
from stopgraph.graph import StopGraph
from stopgraph.paths import find_all_paths
from stopgraph.report import (
    format_matrix,
    format_path,
    format_path_listing,
    paths_to_dict,
)


def test_format_matrix_layout():
    g = StopGraph.from_edges(3, [(0, 1, 13)])
    assert format_matrix(g) == "\n".join(
        [
            "-" * 25,
            "      0   1   2",
            "0     0  13   0",
            "1    13   0   0",
            "2     0   0   0",
        ]
    )


def test_format_matrix_explicit_width():
    g = StopGraph.from_edges(2, [(0, 1, 5)])
    out = format_matrix(g, width=2)
    assert out.splitlines()[1] == "    0 1"
    assert out.splitlines()[2] == "0   0 5"


def test_format_matrix_widens_for_large_weights():
    g = StopGraph.from_edges(2, [(0, 1, 123456)])
    rows = format_matrix(g).splitlines()
    assert rows[2] == "0        0 123456"


def test_format_matrix_custom_config():
    cfg = DisplayConfig(column_width=3, label_width=2, separator_char="=", separator_length=5)
    out = format_matrix(StopGraph(2), config=cfg)
    assert out.splitlines() == ["=====", "    0  1", "0   0  0", "1   0  0"]


def test_format_path():
    assert format_path((0, 4, 7, 5, 6)) == "[0, 4, 7, 5, 6]"
    assert format_path([3]) == "[3]"


def test_listing_no_paths():
    g = StopGraph(3)
    assert (
        format_path_listing(g, 0, 2, [])
        == "No paths found between bus stop 0 and bus stop 2"
    )


def test_listing_with_paths(square):
    paths = find_all_paths(square, 0, 2)
    lines = format_path_listing(square, 0, 2, paths).splitlines()
    assert lines[0] == ""
    assert lines[1] == "All paths between bus stop 0 and bus stop 2:"
    assert lines[2:4] == ["[0, 1, 2]", "[0, 3, 2]"]
    assert "Distances of all paths:" in lines
    assert "Total distance for path [0, 1, 2]: 3" in lines
    assert "Total distance for path [0, 3, 2]: 7" in lines
    assert lines[-1] == "-" * 25


def test_paths_to_dict(usm_graph):
    paths = find_all_paths(usm_graph, 0, 9)
    data = paths_to_dict(usm_graph, 0, 9, paths)
    assert data["source"] == 0 and data["target"] == 9
    assert data["count"] == len(paths)
    assert {"path": [0, 3, 2, 9], "distance": 24} in data["paths"]
