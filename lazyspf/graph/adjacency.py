from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, NamedTuple, Tuple

from lazyspf.algorithms.base import Vertex, Weight


class Arc(NamedTuple):
    """Directed weighted edge of an :class:`AdjacencyGraph`."""

    source: Vertex
    target: Vertex
    weight: Weight


class AdjacencyGraph:
    """
    Explicit directed graph stored as adjacency lists.

    This class enforces:
      - No automatic creation of missing vertices when adding an edge.
      - No duplicate vertices (raising ValueError on duplicates).

    Parallel edges and self-loops are allowed. Weights are stored as given;
    the search engine, not the graph, rejects negative weights.
    """

    def __init__(self) -> None:
        self._adj: Dict[Vertex, List[Arc]] = {}

    @classmethod
    def from_edges(
        cls, edges: Iterable[Tuple[Vertex, Vertex, Weight]]
    ) -> AdjacencyGraph:
        """
        Build a graph from ``(source, target, weight)`` triples.

        Vertices are created on first mention.
        """
        graph = cls()
        for src, dst, weight in edges:
            for vertex in (src, dst):
                if vertex not in graph:
                    graph.add_vertex(vertex)
            graph.add_edge(src, dst, weight)
        return graph

    def __contains__(self, vertex: Vertex) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def vertices(self) -> Iterator[Vertex]:
        return iter(self._adj)

    def arcs(self) -> Iterator[Arc]:
        """Iterate over every edge of the graph."""
        for out_arcs in self._adj.values():
            yield from out_arcs

    def add_vertex(self, vertex: Vertex) -> None:
        """
        Add a single vertex, disallowing duplicates.

        Raises:
            ValueError: If the vertex already exists in the graph.
        """
        if vertex in self._adj:
            raise ValueError(f"Vertex '{vertex}' already exists in this graph.")
        self._adj[vertex] = []

    def add_edge(self, source: Vertex, target: Vertex, weight: Weight) -> Arc:
        """
        Add a directed edge between two existing vertices.

        Returns:
            The stored edge.

        Raises:
            ValueError: If either vertex does not exist.
        """
        if source not in self._adj:
            raise ValueError(f"Source vertex '{source}' does not exist.")
        if target not in self._adj:
            raise ValueError(f"Target vertex '{target}' does not exist.")
        arc = Arc(source, target, weight)
        self._adj[source].append(arc)
        return arc

    # Graph access contract

    def edges(self, vertex: Vertex, out: List[Arc]) -> None:
        """
        Append the outgoing edges of ``vertex``.

        Raises:
            KeyError: If the vertex does not exist.
        """
        try:
            out.extend(self._adj[vertex])
        except KeyError:
            raise KeyError(f"Vertex '{vertex}' is not in the graph.") from None

    def weight(self, edge: Arc, source: Vertex) -> Weight:
        return edge.weight

    def target(self, edge: Arc) -> Vertex:
        return edge.target
