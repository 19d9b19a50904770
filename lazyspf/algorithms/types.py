"""Result containers for shortest-path searches."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from lazyspf.algorithms.base import Edge, Vertex, Weight


@dataclass
class SearchStats:
    """Work counters collected by a single search.

    Attributes:
        extracted: Candidates removed from the priority queue.
        relaxed: Edges examined while expanding finalized vertices.
        inserted: Vertices moved from unseen to frontier.
        decreased: Successful decrease-key operations.
    """

    extracted: int = 0
    relaxed: int = 0
    inserted: int = 0
    decreased: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class PathSummary:
    """Outcome of a successful search.

    Attributes:
        edges: Edges from start to goal, in travel order.
        vertices: Vertices from start to goal; always one more than ``edges``.
        cost: Cumulative weight of the path.
        stats: Work counters of the search that produced the path.
    """

    edges: List[Edge]
    vertices: List[Vertex]
    cost: Weight
    stats: SearchStats

    @property
    def goal(self) -> Vertex:
        """The vertex that satisfied the destination."""
        return self.vertices[-1]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "edges": [_jsonable(e) for e in self.edges],
            "vertices": [_jsonable(v) for v in self.vertices],
            "cost": _jsonable(self.cost),
            "stats": self.stats.to_dict(),
        }


def _jsonable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, tuple):
        return [_jsonable(v) for v in value]
    try:
        return float(value)
    except (TypeError, ValueError):
        return str(value)
