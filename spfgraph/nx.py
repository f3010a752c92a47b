"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and :class:`spfgraph.graph.Graph`,
which identifies vertices by contiguous integer indices.

Example:
    >>> import networkx as nx
    >>> from spfgraph.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=10)
    >>> G.add_edge("B", "C", weight=5)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> result = graph.dijkstra(node_map.to_index["A"])
    >>> [node_map.to_name[v] for v in result.get_path(node_map.to_index["C"])]
    ['A', 'B', 'C']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from spfgraph.graph import Graph

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Union[int, float] = 1,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a :class:`Graph`.

    Node names are sorted by their string form and mapped to indices
    ``0..n-1``. Undirected inputs (``Graph``, ``MultiGraph``) produce two
    directed edges per edge.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        weight_attr: Edge attribute holding the weight (default: "weight")
        default_weight: Weight used when the attribute is missing (default: 1)

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph
        InvalidWeight: If an edge carries a negative or non-numeric weight
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    graph = Graph(len(node_map))

    for u, v, data in G.edges(data=True):
        src = node_map.to_index[u]
        dst = node_map.to_index[v]
        weight = data.get(weight_attr, default_weight)
        if G.is_directed():
            graph.add_edge(src, dst, weight)
        else:
            graph.add_undirected_edge(src, dst, weight)

    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> "nx.MultiDiGraph":
    """Convert a :class:`Graph` to a ``networkx.MultiDiGraph``.

    Every vertex becomes a node, including isolated ones. Parallel edges are
    preserved as separate multigraph edges.

    Args:
        graph: Graph to convert
        node_map: Optional mapping to restore original node names. When omitted,
            nodes are the integer indices.
        weight_attr: Edge attribute name for the weight (default: "weight")

    Returns:
        networkx.MultiDiGraph
    """
    import networkx as nx

    def name(v: int) -> Hashable:
        return node_map.to_name[v] if node_map is not None else v

    G = nx.MultiDiGraph()
    G.add_nodes_from(name(v) for v in range(graph.size))
    for edge in graph:
        G.add_edge(name(edge.src), name(edge.dst), **{weight_attr: edge.weight})
    return G
