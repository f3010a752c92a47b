"""Immutable result of a single-source shortest-path computation.

``ShortestPathResult`` stores one distance and one predecessor per vertex.
Unreachable vertices hold ``None`` in both tables; that is a normal outcome,
not an error. Out-of-range queries raise ``VertexOutOfRange``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from spfgraph.algorithms.base import Cost, VertexID
from spfgraph.exceptions import InternalInvariantViolation
from spfgraph.utils.validation import check_vertex


@dataclass(frozen=True)
class ShortestPathResult:
    """Distances and predecessor tree from one source vertex.

    Attributes:
        source: The vertex the computation started from.
        distances: Shortest distance per vertex, ``None`` if unreachable.
        predecessors: Previous vertex on the reported shortest path,
            ``None`` for the source and for unreachable vertices.
    """

    source: VertexID
    distances: Tuple[Optional[Cost], ...]
    predecessors: Tuple[Optional[VertexID], ...]

    @property
    def size(self) -> int:
        """Number of vertices covered by this result."""
        return len(self.distances)

    def get_distance(self, vertex: VertexID) -> Optional[Cost]:
        """Return the shortest distance to ``vertex``, or ``None`` if unreachable.

        Raises:
            VertexOutOfRange: If ``vertex`` is outside ``[0, size)``.
        """
        return self.distances[check_vertex(vertex, self.size)]

    def is_reachable(self, vertex: VertexID) -> bool:
        return self.get_distance(vertex) is not None

    def reachable(self) -> List[VertexID]:
        """Return reachable vertex ids in ascending order."""
        return [v for v, d in enumerate(self.distances) if d is not None]

    def get_path(self, vertex: VertexID) -> Optional[List[VertexID]]:
        """Reconstruct the shortest path ``source -> ... -> vertex``.

        Walks predecessor links back from ``vertex`` and reverses them. The
        walk is bounded by ``size`` steps.

        Args:
            vertex: Destination vertex.

        Returns:
            The vertex sequence starting at ``source`` and ending at ``vertex``,
            or ``None`` if ``vertex`` is unreachable.

        Raises:
            VertexOutOfRange: If ``vertex`` is outside ``[0, size)``.
            InternalInvariantViolation: If the predecessor chain loops or ends
                anywhere other than ``source``.
        """
        if self.get_distance(vertex) is None:
            return None

        path = [vertex]
        current = vertex
        for _ in range(self.size):
            if current == self.source:
                path.reverse()
                return path
            prev = self.predecessors[current]
            if prev is None:
                raise InternalInvariantViolation(
                    f"Predecessor chain from {vertex} ends at {current}, "
                    f"not at source {self.source}."
                )
            path.append(prev)
            current = prev

        raise InternalInvariantViolation(
            f"Predecessor chain from {vertex} does not reach source {self.source} "
            f"within {self.size} steps (cycle)."
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "source": self.source,
            "distances": list(self.distances),
            "predecessors": list(self.predecessors),
        }
