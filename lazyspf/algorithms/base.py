from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Hashable, Union

#: Vertex identifier. Any hashable value supporting equality.
Vertex = Hashable

#: Edge value. Opaque to the engine, inspected only through the graph.
Edge = Any

#: Cumulative or per-edge weight (int, float, Fraction, Decimal, ...).
Weight = Any

#: A destination is either a single vertex or a predicate over vertices.
Destination = Union[Vertex, Callable[[Vertex], bool]]

#: Cumulative weight of the start vertex. Adds cleanly to every numeric type.
ZERO_WEIGHT = 0


class WeightPolicy(IntEnum):
    """
    Rules for accepting edge weights read from a graph.
    """

    #: Zero-weight edges are accepted; negative weights are rejected.
    NON_NEGATIVE = 1
    #: Only weights strictly greater than zero are accepted.
    STRICTLY_POSITIVE = 2


class VertexState(IntEnum):
    """Classification of a vertex during a search."""

    #: Not discovered yet.
    UNSEEN = 0
    #: Discovered, sitting in the priority queue.
    FRONTIER = 1
    #: Extracted with its minimal cumulative weight; never revisited.
    FINALIZED = 2


class PathError(Exception):
    """Base class for shortest-path search failures."""


class InvalidWeightError(PathError, ValueError):
    """Raised when the graph reports a weight rejected by the weight policy.

    Attributes:
        edge: The offending edge.
        source: Vertex whose expansion produced the edge.
        weight: The weight reported by the graph.
    """

    def __init__(self, edge: Edge, source: Vertex, weight: Weight) -> None:
        self.edge = edge
        self.source = source
        self.weight = weight
        super().__init__(
            f"Edge {edge!r} from vertex {source!r} has invalid weight {weight!r}."
        )


class NoPathFoundError(PathError, LookupError):
    """Raised when the frontier is exhausted before the destination is reached.

    Attributes:
        start: The start vertex of the failed search.
    """

    def __init__(self, start: Vertex) -> None:
        self.start = start
        super().__init__(f"No path found from vertex {start!r}.")
