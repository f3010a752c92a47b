"""Shortest-path-first (SPF) computation.

Implements the classic lazy-deletion Dijkstra over a ``heapq`` min-heap:
instead of a decrease-key operation, an improved distance pushes a new entry
and stale entries are discarded when popped. Runs in O((V+E) log V).

Edge weights must be non-negative; ``Graph`` rejects anything else.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import TYPE_CHECKING, List, Optional

from spfgraph.algorithms.base import Cost, QueueEntry, VertexID
from spfgraph.logging import get_logger
from spfgraph.results import ShortestPathResult
from spfgraph.utils.validation import check_vertex

if TYPE_CHECKING:
    from spfgraph.graph import Graph

logger = get_logger(__name__)


class ShortestPathEngine:
    """Single-source shortest paths over a :class:`~spfgraph.graph.Graph`.

    The engine keeps no state between calls: every ``compute`` allocates its
    own distance table, predecessor table and heap, and returns an immutable
    result. The graph must not be mutated while ``compute`` runs.

    Example:
        >>> g = Graph(3)
        >>> _ = g.add_edge(0, 1, 2)
        >>> _ = g.add_edge(1, 2, 2)
        >>> ShortestPathEngine(g).compute(0).get_path(2)
        [0, 1, 2]
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def compute(self, source: VertexID) -> ShortestPathResult:
        """Compute shortest distances and a predecessor tree from ``source``.

        Args:
            source: The source vertex.

        Returns:
            ShortestPathResult with one entry per vertex.

        Raises:
            VertexOutOfRange: If ``source`` is not in the graph.
        """
        graph = self.graph
        source = check_vertex(source, graph.size)
        outgoing_adjacencies = graph._adj

        dist: List[Optional[Cost]] = [None] * graph.size
        prev: List[Optional[VertexID]] = [None] * graph.size
        dist[source] = 0
        min_pq: List[QueueEntry] = [QueueEntry(0, source)]

        while min_pq:
            current_cost, node_id = heappop(min_pq)
            if current_cost > dist[node_id]:
                continue

            for edge in outgoing_adjacencies[node_id]:
                new_cost = current_cost + edge.weight
                best = dist[edge.dst]
                if best is None or new_cost < best:
                    dist[edge.dst] = new_cost
                    prev[edge.dst] = node_id
                    heappush(min_pq, QueueEntry(new_cost, edge.dst))

        result = ShortestPathResult(
            source=source, distances=tuple(dist), predecessors=tuple(prev)
        )
        logger.debug(
            f"SPF from vertex {source}: reached {len(result.reachable())} "
            f"of {graph.size} vertices"
        )
        return result


def spf(graph: Graph, source: VertexID) -> ShortestPathResult:
    """Shortcut for ``ShortestPathEngine(graph).compute(source)``."""
    return ShortestPathEngine(graph).compute(source)
