"""spfgraph: single-source shortest paths on weighted directed graphs.

Primary API:
    Graph - fixed-size adjacency-list digraph with non-negative weights
    ShortestPathEngine - lazy-deletion Dijkstra over a Graph
    ShortestPathResult - immutable distances and predecessor tree
    spf() - shortcut for ShortestPathEngine(graph).compute(source)
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from spfgraph import Graph

    g = Graph(4)
    g.add_edge(0, 1, 5)
    g.add_undirected_edge(1, 2, 1)

    result = g.dijkstra(0)
    result.get_distance(2)  # 6
    result.get_path(2)      # [0, 1, 2]
    result.get_path(3)      # None (unreachable)
"""

from __future__ import annotations

from spfgraph import cli, logging
from spfgraph._version import __version__
from spfgraph.algorithms.spf import ShortestPathEngine, spf
from spfgraph.exceptions import (
    InternalInvariantViolation,
    InvalidSize,
    InvalidWeight,
    SpfGraphError,
    VertexOutOfRange,
)
from spfgraph.graph import Edge, Graph
from spfgraph.nx import NodeMap, from_networkx, to_networkx
from spfgraph.results import ShortestPathResult

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    # Computation
    "ShortestPathEngine",
    "ShortestPathResult",
    "spf",
    # Errors
    "SpfGraphError",
    "InvalidSize",
    "VertexOutOfRange",
    "InvalidWeight",
    "InternalInvariantViolation",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
