"""Shortest-path algorithms over :class:`spfgraph.graph.Graph`."""

from spfgraph.algorithms.base import Cost, QueueEntry, VertexID
from spfgraph.algorithms.spf import ShortestPathEngine, spf

__all__ = ["Cost", "QueueEntry", "VertexID", "ShortestPathEngine", "spf"]
