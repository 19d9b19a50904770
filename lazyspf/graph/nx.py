"""NetworkX graph adapter.

Exposes a NetworkX graph through the graph access contract without copying
it. Edges are reported as ``(u, v)`` tuples for simple graphs and as
``(u, v, key)`` tuples for multigraphs, so parallel edges stay distinct.

Example:
    >>> import networkx as nx
    >>> from lazyspf import NetworkXGraph, shortest_path
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=10)
    >>> G.add_edge("B", "C", cost=5)
    >>> shortest_path(NetworkXGraph(G), "A", "C")
    [('A', 'B'), ('B', 'C')]
"""

from __future__ import annotations

from typing import Any, List, Tuple, Union

import networkx as nx

from lazyspf.algorithms.base import Vertex, Weight

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
NxEdge = Union[Tuple[Vertex, Vertex], Tuple[Vertex, Vertex, Any]]


class NetworkXGraph:
    """Read-only view of a NetworkX graph for the search engine.

    Undirected graphs are traversed in both directions.

    Args:
        graph: The wrapped NetworkX graph. It must not be mutated while a
            search is running.
        weight: Edge attribute holding the weight.
        default_weight: Weight of edges lacking the ``weight`` attribute.
    """

    def __init__(
        self,
        graph: NxGraph,
        weight: str = "cost",
        default_weight: Weight = 1,
    ) -> None:
        self.graph = graph
        self.weight_attr = weight
        self.default_weight = default_weight
        self._multi = graph.is_multigraph()

    def edges(self, vertex: Vertex, out: List[NxEdge]) -> None:
        """Append the outgoing edges of ``vertex``.

        Raises:
            KeyError: If the vertex is not in the graph.
        """
        try:
            neighbors = self.graph.adj[vertex]
        except KeyError:
            raise KeyError(f"Vertex '{vertex}' is not in the graph.") from None
        if self._multi:
            for nbr, keydict in neighbors.items():
                for key in keydict:
                    out.append((vertex, nbr, key))
        else:
            for nbr in neighbors:
                out.append((vertex, nbr))

    def weight(self, edge: NxEdge, source: Vertex) -> Weight:
        if self._multi:
            u, v, key = edge
            attrs = self.graph.adj[u][v][key]
        else:
            u, v = edge
            attrs = self.graph.adj[u][v]
        return attrs.get(self.weight_attr, self.default_weight)

    def target(self, edge: NxEdge) -> Vertex:
        return edge[1]
