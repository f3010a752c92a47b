import json

import pytest

from spfgraph.exceptions import InternalInvariantViolation, VertexOutOfRange
from spfgraph.results import ShortestPathResult


def test_get_distance_and_reachability(demo_graph):
    result = demo_graph.dijkstra(0)
    assert result.size == 10
    assert result.get_distance(0) == 0
    assert result.get_distance(5) == 2
    assert result.get_distance(6) is None
    assert result.is_reachable(4)
    assert not result.is_reachable(9)
    assert result.reachable() == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("vertex", [-1, 10, 100, "1", 1.5])
def test_queries_out_of_range(demo_graph, vertex):
    result = demo_graph.dijkstra(0)
    with pytest.raises(VertexOutOfRange):
        result.get_distance(vertex)
    with pytest.raises(VertexOutOfRange):
        result.get_path(vertex)


def test_get_path_of_source_is_single_vertex(demo_graph):
    assert demo_graph.dijkstra(0).get_path(0) == [0]
    assert demo_graph.dijkstra(4).get_path(4) == [4]


def test_get_path_returns_fresh_list(demo_graph):
    result = demo_graph.dijkstra(0)
    path = result.get_path(4)
    path.append(99)
    assert result.get_path(4) == [0, 3, 4]


def test_result_is_immutable(demo_graph):
    result = demo_graph.dijkstra(0)
    with pytest.raises(AttributeError):
        result.source = 1
    assert isinstance(result.distances, tuple)
    assert isinstance(result.predecessors, tuple)


def test_predecessor_cycle_raises():
    # 1 and 2 point at each other and never reach the source
    result = ShortestPathResult(
        source=0, distances=(0, 1, 1), predecessors=(None, 2, 1)
    )
    with pytest.raises(InternalInvariantViolation):
        result.get_path(1)


def test_self_predecessor_raises():
    result = ShortestPathResult(source=0, distances=(0, 1), predecessors=(None, 1))
    with pytest.raises(InternalInvariantViolation):
        result.get_path(1)


def test_broken_chain_raises():
    result = ShortestPathResult(source=0, distances=(0, 1), predecessors=(None, None))
    with pytest.raises(InternalInvariantViolation):
        result.get_path(1)


def test_invariant_violation_is_runtime_error():
    assert issubclass(InternalInvariantViolation, RuntimeError)


def test_to_dict_is_json_serializable(demo_graph):
    data = demo_graph.dijkstra(0).to_dict()
    assert data == {
        "source": 0,
        "distances": [0, 5, 3, 2, 3, 2, None, None, None, None],
        "predecessors": [None, 0, 0, 0, 3, 0, None, None, None, None],
    }
    assert json.loads(json.dumps(data)) == data
