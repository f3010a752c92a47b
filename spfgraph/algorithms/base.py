from __future__ import annotations

from typing import NamedTuple, Union

#: A vertex is identified by its integer index in ``[0, size)``.
VertexID = int

#: Numeric path length (sum of edge weights). Always non-negative.
Cost = Union[int, float]


class QueueEntry(NamedTuple):
    """Min-heap entry used during SPF.

    Field order matters: ``heapq`` compares tuples element-wise, so entries are
    extracted by ascending ``priority`` and ties fall back to the lower vertex id.
    """

    priority: Cost
    vertex: VertexID
