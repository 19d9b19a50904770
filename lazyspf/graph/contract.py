"""Graph access contract consumed by the search engine.

The engine never sees a whole graph. It asks for the outgoing edges of one
vertex at a time and reads each edge's weight and target through the three
methods below, so graphs can be explicit, generated or infinite.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from lazyspf.algorithms.base import Edge, Vertex, Weight


@runtime_checkable
class Graph(Protocol):
    """Directed graph with non-negative edge weights.

    Implementations must return the same edges, weights and targets for the
    same inputs for the duration of a search.
    """

    def edges(self, vertex: Vertex, out: List[Edge]) -> None:
        """Append the outgoing edges of ``vertex`` to ``out``.

        ``out`` is owned by the caller and arrives empty. Implementations
        must only append to it.
        """
        ...

    def weight(self, edge: Edge, source: Vertex) -> Weight:
        """Return the weight of ``edge``, which leaves ``source``."""
        ...

    def target(self, edge: Edge) -> Vertex:
        """Return the vertex ``edge`` arrives at."""
        ...
