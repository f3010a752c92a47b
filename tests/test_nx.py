"""Tests for spfgraph.nx NetworkX conversion utilities."""

import random

import networkx as nx
import pytest

from spfgraph.exceptions import InvalidWeight
from spfgraph.graph import Graph
from spfgraph.nx import NodeMap, from_networkx, to_networkx


class TestNodeMap:
    def test_from_names_creates_bidirectional_mapping(self):
        node_map = NodeMap.from_names(["A", "B", "C"])
        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}
        assert len(node_map) == 3

    def test_from_names_empty_list(self):
        node_map = NodeMap.from_names([])
        assert len(node_map) == 0


class TestFromNetworkX:
    def test_digraph(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=10)
        G.add_edge("B", "C", weight=5)

        graph, node_map = from_networkx(G)
        assert graph.size == 3
        assert graph.num_edges() == 2

        result = graph.dijkstra(node_map.to_index["A"])
        path = result.get_path(node_map.to_index["C"])
        assert [node_map.to_name[v] for v in path] == ["A", "B", "C"]
        assert result.get_distance(node_map.to_index["C"]) == 15

    def test_undirected_graph_adds_both_directions(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=2)

        graph, node_map = from_networkx(G)
        assert graph.num_edges() == 2
        result = graph.dijkstra(node_map.to_index["B"])
        assert result.get_distance(node_map.to_index["A"]) == 2

    def test_multidigraph_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge(0, 1, weight=4)
        G.add_edge(0, 1, weight=1)

        graph, _ = from_networkx(G)
        assert [e.weight for e in graph.edges(0)] == [4, 1]
        assert graph.dijkstra(0).get_distance(1) == 1

    def test_default_and_custom_weight_attr(self):
        G = nx.DiGraph()
        G.add_edge("A", "B")
        G.add_edge("B", "C", cost=7)

        graph, node_map = from_networkx(G, weight_attr="cost", default_weight=3)
        result = graph.dijkstra(node_map.to_index["A"])
        assert result.get_distance(node_map.to_index["C"]) == 10

    def test_isolated_nodes_are_kept(self):
        G = nx.DiGraph()
        G.add_nodes_from(["X", "Y"])
        graph, node_map = from_networkx(G)
        assert graph.size == 2
        assert graph.dijkstra(node_map.to_index["X"]).get_path(
            node_map.to_index["Y"]
        ) is None

    def test_negative_weight_rejected(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=-1)
        with pytest.raises(InvalidWeight):
            from_networkx(G)

    def test_non_networkx_input(self):
        with pytest.raises(TypeError):
            from_networkx({"A": ["B"]})


class TestToNetworkX:
    def test_preserves_vertices_and_edges(self, demo_graph):
        G = to_networkx(demo_graph)
        assert isinstance(G, nx.MultiDiGraph)
        assert sorted(G.nodes()) == list(range(10))
        assert sorted((u, v, d["weight"]) for u, v, d in G.edges(data=True)) == sorted(
            (e.src, e.dst, e.weight) for e in demo_graph
        )

    def test_node_map_restores_names(self):
        node_map = NodeMap.from_names(["A", "B"])
        g = Graph(2)
        g.add_edge(0, 1, 3)
        G = to_networkx(g, node_map, weight_attr="cost")
        assert list(G.edges(data="cost")) == [("A", "B", 3)]

    def test_round_trip_keeps_edge_multiset(self, line1):
        graph, _ = from_networkx(to_networkx(line1))
        assert sorted((e.src, e.dst, e.weight) for e in graph) == sorted(
            (e.src, e.dst, e.weight) for e in line1
        )


@pytest.mark.parametrize("seed", range(8))
def test_distances_agree_with_networkx(seed):
    rng = random.Random(seed)
    size = 20
    g = Graph(size)
    for _ in range(60):
        g.add_edge(rng.randrange(size), rng.randrange(size), rng.randint(0, 20))

    source = rng.randrange(size)
    expected = nx.single_source_dijkstra_path_length(
        to_networkx(g), source, weight="weight"
    )
    result = g.dijkstra(source)

    assert {v: d for v, d in enumerate(result.distances) if d is not None} == expected
