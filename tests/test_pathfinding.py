import pytest

from routegraph.analysis.pathfinding import NegativeCycleError, PathFinder
from routegraph.core.graph import build_graph


def test_direct_edge_distance_is_one(triangle_graph):
    pathfinder = PathFinder(triangle_graph)
    assert pathfinder.get_distance("A", "B") == 1
    assert pathfinder.get_distance("A", "C") == 1


def test_two_hop_distance(chain_graph):
    assert PathFinder(chain_graph).get_distance("A", "C") == 2


def test_unreachable_and_self_pairs_are_absent(chain_graph):
    pathfinder = PathFinder(chain_graph)
    assert pathfinder.get_distance("C", "A") is None
    assert pathfinder.get_distance("A", "A") is None
    assert pathfinder.floyd_warshall() == {(0, 1): 1, (1, 2): 1, (0, 2): 2}


def test_unknown_label_raises(chain_graph):
    with pytest.raises(KeyError):
        PathFinder(chain_graph).get_distance("A", "ZZZ")


def test_triangle_average_path_length(triangle_graph):
    assert PathFinder(triangle_graph).calculate_average_path_length() == pytest.approx(1.0)


def test_chain_average_path_length(chain_graph):
    assert PathFinder(chain_graph).calculate_average_path_length() == pytest.approx(4 / 3)


def test_isolated_location_is_ignored():
    # C only has a route to itself, so only A->B counts
    graph = build_graph([("A", "B"), ("C", "C")])
    pathfinder = PathFinder(graph)
    assert pathfinder.floyd_warshall() == {(0, 1): 1}
    assert pathfinder.calculate_average_path_length() == pytest.approx(1.0)


def test_cycle_distances():
    graph = build_graph([("A", "B"), ("B", "C"), ("C", "A")])
    distances = PathFinder(graph).floyd_warshall()
    assert len(distances) == 6
    assert distances[(0, 2)] == 2
    assert distances[(2, 1)] == 2


def test_parallel_edges_do_not_shorten_paths():
    graph = build_graph([("A", "B"), ("A", "B")])
    assert PathFinder(graph).floyd_warshall() == {(0, 1): 1}


@pytest.mark.parametrize("routes", [[], [("A", "A")]])
def test_no_reachable_pair_gives_zero(routes):
    assert PathFinder(build_graph(routes)).calculate_average_path_length() == 0.0


def test_negative_cycle_raises():
    graph = build_graph([("A", "B"), ("B", "A")])
    with pytest.raises(NegativeCycleError):
        PathFinder(graph).floyd_warshall(edge_weight=lambda route_idx: -1)


def test_average_falls_back_to_zero_on_failure(triangle_graph, monkeypatch, caplog):
    def _fail(self, edge_weight=None):
        raise NegativeCycleError("Graph contains a negative cycle")

    monkeypatch.setattr(PathFinder, "floyd_warshall", _fail)
    assert PathFinder(triangle_graph).calculate_average_path_length() == 0.0
    assert "reporting 0.0" in caplog.text


def test_distance_matrix_is_computed_once(triangle_graph, monkeypatch):
    pathfinder = PathFinder(triangle_graph)
    first = pathfinder.get_distance_matrix()
    monkeypatch.setattr(PathFinder, "floyd_warshall", lambda self: pytest.fail("recomputed"))
    assert pathfinder.get_distance_matrix() is first
