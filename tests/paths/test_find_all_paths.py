import networkx as nx
import pytest

from stopgraph.convert import to_networkx
from stopgraph.errors import InvalidArgument, OutOfRange
from stopgraph.graph import StopGraph
from stopgraph.paths import (
    find_all_paths,
    iter_all_paths,
    path_distances,
    total_distance,
)


def test_usm_paths_in_discovery_order(usm_graph):
    assert find_all_paths(usm_graph, 0, 6) == [
        (0, 1, 4, 7, 5, 6),
        (0, 1, 5, 6),
        (0, 3, 2, 7, 4, 1, 5, 6),
        (0, 3, 2, 7, 5, 6),
        (0, 4, 1, 5, 6),
        (0, 4, 7, 5, 6),
    ]


def test_usm_path_distances(usm_graph):
    paths = find_all_paths(usm_graph, 0, 6)
    totals = dict(path_distances(usm_graph, paths))
    assert totals[(0, 4, 7, 5, 6)] == 51
    assert totals[(0, 1, 5, 6)] == 44
    assert all(p.count(0) == 1 for p in paths)


def test_usm_path_to_leaf(usm_graph):
    paths = find_all_paths(usm_graph, 0, 9)
    assert (0, 3, 2, 9) in paths
    assert total_distance(usm_graph, (0, 3, 2, 9)) == 24
    # 9 hangs off 2 only
    assert all(p[-2:] == (2, 9) for p in paths)


def test_source_equals_target(usm_graph):
    for s in range(usm_graph.vertex_count):
        assert find_all_paths(usm_graph, s, s) == [(s,)]


def test_single_vertex_graph():
    assert find_all_paths(StopGraph(1), 0, 0) == [(0,)]


def test_disconnected_returns_empty():
    g = StopGraph.from_edges(4, [(0, 1, 3), (2, 3, 5)])
    assert find_all_paths(g, 0, 3) == []
    assert find_all_paths(g, 3, 0) == []


def test_zero_weight_is_not_traversed():
    g = StopGraph.from_edges(3, [(0, 1, 2), (1, 2, 0)])
    assert find_all_paths(g, 0, 2) == []


def test_square_has_two_routes(square):
    assert find_all_paths(square, 0, 2) == [(0, 1, 2), (0, 3, 2)]


def test_complete_graph_path_count():
    # K4: between two fixed stops there are 1 + 2 + 2 = 5 simple paths
    n = 4
    g = StopGraph.from_edges(
        n, [(u, v, 1) for u in range(n) for v in range(u + 1, n)]
    )
    assert len(find_all_paths(g, 0, 3)) == 5


@pytest.mark.parametrize("source,target", [(0, 6), (6, 0), (2, 1), (8, 9), (4, 3)])
def test_paths_are_simple_and_connected(usm_graph, source, target):
    paths = find_all_paths(usm_graph, source, target)
    assert paths
    for p in paths:
        assert p[0] == source and p[-1] == target
        assert len(set(p)) == len(p)
        assert all(usm_graph.distance(a, b) != 0 for a, b in zip(p, p[1:]))
    assert len(set(paths)) == len(paths)


@pytest.mark.parametrize("source,target", [(0, 6), (3, 8), (1, 9)])
def test_reverse_query_contains_reversed_paths(usm_graph, source, target):
    forward = set(find_all_paths(usm_graph, source, target))
    backward = set(find_all_paths(usm_graph, target, source))
    assert forward
    assert {tuple(reversed(p)) for p in forward} == backward


@pytest.mark.parametrize("source,target", [(0, 6), (0, 9), (5, 8)])
def test_agrees_with_networkx(usm_graph, source, target):
    expected = {
        tuple(p) for p in nx.all_simple_paths(to_networkx(usm_graph), source, target)
    }
    assert set(find_all_paths(usm_graph, source, target)) == expected


@pytest.mark.parametrize("source,target", [(-1, 0), (0, 10), (10, 10)])
def test_out_of_range_query(usm_graph, source, target):
    with pytest.raises(OutOfRange):
        find_all_paths(usm_graph, source, target)


def test_iter_validates_eagerly(usm_graph):
    # No iteration needed for the error to surface
    with pytest.raises(OutOfRange):
        iter_all_paths(usm_graph, 0, 99)


def test_iter_matches_list(usm_graph):
    assert list(iter_all_paths(usm_graph, 0, 6)) == find_all_paths(usm_graph, 0, 6)


def test_partial_iteration_leaves_no_state(usm_graph):
    it = iter_all_paths(usm_graph, 0, 6)
    first = next(it)
    it.close()
    assert find_all_paths(usm_graph, 0, 6)[0] == first
    assert len(find_all_paths(usm_graph, 0, 6)) == 6


def test_enumeration_does_not_mutate_graph(usm_graph):
    before = usm_graph.to_lists()
    find_all_paths(usm_graph, 0, 6)
    assert usm_graph.to_lists() == before


def test_total_distance_single_stop(usm_graph):
    assert total_distance(usm_graph, [3]) == 0


def test_total_distance_accepts_lists(usm_graph):
    assert total_distance(usm_graph, [0, 1, 5, 6]) == 44


def test_total_distance_empty_path(usm_graph):
    with pytest.raises(InvalidArgument):
        total_distance(usm_graph, [])


def test_path_distances_preserves_order(square):
    assert path_distances(square, [[0, 3, 2], (0, 1, 2)]) == [
        ((0, 3, 2), 7),
        ((0, 1, 2), 3),
    ]


def test_debug_log_reports_count(usm_graph, caplog):
    caplog.set_level("DEBUG", logger="stopgraph.paths")
    find_all_paths(usm_graph, 0, 9)
    assert any("path(s) from stop 0 to stop 9" in r.getMessage() for r in caplog.records)


def test_early_close_restores_search_state(usm_graph):
    it = iter_all_paths(usm_graph, 0, 6)
    next(it)
    state = it.gi_frame.f_locals
    visited, current = state["visited"], state["current"]
    assert current == [0, 1, 4, 7, 5, 6]
    assert sum(visited) == 6

    it.close()
    assert current == []
    assert not any(visited)
