from __future__ import annotations

from typing import List, Sequence

from lazyspf.algorithms.base import ZERO_WEIGHT, Edge, Vertex, Weight
from lazyspf.graph.contract import Graph


def path_vertices(graph: Graph, start: Vertex, edges: Sequence[Edge]) -> List[Vertex]:
    """
    List the vertices visited by a path.

    Args:
        graph: Graph the edges belong to.
        start: Vertex the first edge leaves from.
        edges: Edges in travel order.

    Returns:
        ``[start, target(edges[0]), target(edges[1]), ...]``.
    """
    vertices = [start]
    for edge in edges:
        vertices.append(graph.target(edge))
    return vertices


def path_cost(graph: Graph, start: Vertex, edges: Sequence[Edge]) -> Weight:
    """
    Sum the edge weights of a path, passing each edge its source vertex.
    """
    total = ZERO_WEIGHT
    source = start
    for edge in edges:
        total = total + graph.weight(edge, source)
        source = graph.target(edge)
    return total
