"""Exception hierarchy for spfgraph.

Each error also derives from the builtin a caller would naturally catch, so
``except ValueError`` or ``except IndexError`` keeps working.
"""


class SpfGraphError(Exception):
    """Base exception for all spfgraph errors."""


class InvalidSize(SpfGraphError, ValueError):
    """Raised when a graph is constructed with a size that is not a non-negative integer."""


class VertexOutOfRange(SpfGraphError, IndexError):
    """Raised when a vertex index falls outside ``[0, size)``."""


class InvalidWeight(SpfGraphError, ValueError):
    """Raised when an edge weight is negative or not a finite real number."""


class InternalInvariantViolation(SpfGraphError, RuntimeError):
    """Raised when a shortest-path result is internally inconsistent.

    This indicates a bug rather than a user error, e.g. a cycle in the
    predecessor chain found while reconstructing a path.
    """
