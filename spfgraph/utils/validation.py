"""Argument validation shared by the graph and result types."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

from spfgraph.exceptions import InvalidSize, InvalidWeight, VertexOutOfRange


def is_int(value: Any) -> bool:
    """True for any integral value except ``bool``."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def check_size(size: Any) -> int:
    """Return ``size`` as an ``int`` or raise ``InvalidSize``."""
    if not is_int(size) or size < 0:
        raise InvalidSize(f"Graph size must be a non-negative integer, got {size!r}.")
    return int(size)


def check_vertex(vertex: Any, size: int) -> int:
    """Return ``vertex`` as an ``int`` if it lies in ``[0, size)``.

    Raises:
        VertexOutOfRange: If ``vertex`` is not an integer or is out of range.
    """
    if not is_int(vertex) or not 0 <= vertex < size:
        raise VertexOutOfRange(
            f"Vertex {vertex!r} is out of range for a graph of size {size}."
        )
    return int(vertex)


def check_weight(weight: Any) -> Any:
    """Return ``weight`` unchanged if it is a finite, non-negative real number.

    Raises:
        InvalidWeight: On negative, NaN, infinite, boolean or non-numeric input.
    """
    if (
        isinstance(weight, bool)
        or not isinstance(weight, Real)
        or not math.isfinite(weight)
        or weight < 0
    ):
        raise InvalidWeight(
            f"Edge weight must be a finite non-negative number, got {weight!r}."
        )
    return weight
