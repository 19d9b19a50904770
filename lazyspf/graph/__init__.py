"""Graph access contract and graph implementations.

This package provides the `Graph` protocol consumed by the search engine,
an explicit adjacency-list graph (`adjacency`), a NetworkX adapter (`nx`)
and generated on-demand graphs (`implicit`).
"""

from lazyspf.graph.adjacency import AdjacencyGraph, Arc
from lazyspf.graph.contract import Graph
from lazyspf.graph.implicit import (
    BinaryTreeGraph,
    CycleGraph,
    GridGraph,
    NumberLatticeGraph,
)
from lazyspf.graph.nx import NetworkXGraph

__all__ = [
    "AdjacencyGraph",
    "Arc",
    "BinaryTreeGraph",
    "CycleGraph",
    "Graph",
    "GridGraph",
    "NetworkXGraph",
    "NumberLatticeGraph",
]
