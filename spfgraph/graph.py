"""Adjacency-list graph over integer vertices and non-negative edge weights.

The graph has a fixed number of vertices, identified by ``0..size-1``, and grows
only by edge insertion. It carries no algorithmic behavior of its own; see
:mod:`spfgraph.algorithms.spf` for shortest-path computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Tuple

from spfgraph.algorithms.base import Cost, VertexID
from spfgraph.utils.validation import (
    check_size,
    check_vertex,
    check_weight,
    is_int,
)

if TYPE_CHECKING:
    from spfgraph.results import ShortestPathResult


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge.

    Attributes:
        src: Source vertex index.
        dst: Destination vertex index.
        weight: Non-negative edge weight.
    """

    src: VertexID
    dst: VertexID
    weight: Cost


class Graph:
    """
    A directed multigraph stored as one ordered edge list per source vertex.

    This class enforces:
      - A fixed vertex count chosen at construction time.
      - Edge endpoints within ``[0, size)``.
      - Finite, non-negative edge weights.

    Parallel edges and self-loops are allowed. An undirected edge is stored as
    two directed edges with equal weight.
    """

    def __init__(self, size: int) -> None:
        """
        Initialize an empty graph.

        Args:
            size: Number of vertices.

        Raises:
            InvalidSize: If ``size`` is not a non-negative integer.
        """
        self._size = check_size(size)
        self._adj: List[List[Edge]] = [[] for _ in range(self._size)]
        self._num_edges = 0

    def __repr__(self) -> str:
        return f"Graph(size={self._size}, edges={self._num_edges})"

    @property
    def size(self) -> int:
        """Number of vertices."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, vertex: object) -> bool:
        return is_int(vertex) and 0 <= vertex < self._size

    def __iter__(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by source vertex in insertion order."""
        for edges in self._adj:
            yield from edges

    def num_edges(self) -> int:
        """Return the number of directed edges."""
        return self._num_edges

    def edges(self, vertex: VertexID) -> Tuple[Edge, ...]:
        """
        Return the outgoing edges of ``vertex`` in insertion order.

        Raises:
            VertexOutOfRange: If ``vertex`` is not in the graph.
        """
        return tuple(self._adj[check_vertex(vertex, self._size)])

    #
    # Edge management
    #
    def add_edge(self, src: VertexID, dst: VertexID, weight: Cost) -> Edge:
        """
        Append a directed edge ``src -> dst``.

        Args:
            src: Source vertex.
            dst: Destination vertex.
            weight: Non-negative edge weight.

        Returns:
            Edge: The stored edge.

        Raises:
            VertexOutOfRange: If either endpoint is outside ``[0, size)``.
            InvalidWeight: If ``weight`` is negative or not a finite number.
        """
        src = check_vertex(src, self._size)
        dst = check_vertex(dst, self._size)
        edge = Edge(src, dst, check_weight(weight))
        self._adj[src].append(edge)
        self._num_edges += 1
        return edge

    def add_undirected_edge(
        self, src: VertexID, dst: VertexID, weight: Cost
    ) -> Tuple[Edge, Edge]:
        """
        Add ``src -> dst`` and ``dst -> src`` with the same weight.

        All arguments are validated before either edge is inserted, so a failure
        leaves the graph unchanged.

        Returns:
            Tuple[Edge, Edge]: The forward and reverse edges.

        Raises:
            VertexOutOfRange: If either endpoint is outside ``[0, size)``.
            InvalidWeight: If ``weight`` is negative or not a finite number.
        """
        check_vertex(src, self._size)
        check_vertex(dst, self._size)
        check_weight(weight)
        return self.add_edge(src, dst, weight), self.add_edge(dst, src, weight)

    def dijkstra(self, source: VertexID) -> ShortestPathResult:
        """Shortcut for ``ShortestPathEngine(self).compute(source)``."""
        from spfgraph.algorithms.spf import ShortestPathEngine

        return ShortestPathEngine(self).compute(source)
