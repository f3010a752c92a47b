"""Configuration classes for spfgraph components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from spfgraph.graph import Graph

EdgeTriple = Tuple[int, int, int]


@dataclass
class DemoConfig:
    """Configuration for the demonstration graph printed by ``spfgraph demo``."""

    # Number of vertices; vertices without edges show up as unreachable
    size: int = 10

    source: int = 0

    # Directed (src, dst, weight) triples
    edges: Tuple[EdgeTriple, ...] = (
        (0, 1, 5),
        (0, 2, 3),
        (0, 3, 2),
        (0, 5, 2),
        (1, 3, 1),
        (2, 4, 1),
        (3, 4, 1),
        (4, 5, 3),
    )

    # Output labels for vertices the source cannot reach
    unreachable_label: str = "unreachable"
    no_path_label: str = "The path does not exist."

    def build_graph(self) -> Graph:
        """Build a fresh graph from ``size`` and ``edges``."""
        graph = Graph(self.size)
        for src, dst, weight in self.edges:
            graph.add_edge(src, dst, weight)
        return graph


# Global configuration instance
DEMO_CONFIG = DemoConfig()
