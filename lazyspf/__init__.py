"""lazyspf: shortest paths in graphs discovered on demand.

lazyspf runs Dijkstra's algorithm against a three-method graph access
contract, so graphs never have to be materialized: explicit adjacency lists,
NetworkX graphs, and infinite generated graphs (grids, number lattices,
trees) all work with the same engine.

Primary API:
    shortest_path() - Edges of a minimum-weight path to a vertex or predicate
    shortest_path_summary() - Same search, with vertices, cost and counters
    Graph - The graph access contract (edges, weight, target)
    AdjacencyGraph, NetworkXGraph - Explicit graph implementations
    InvalidWeightError, NoPathFoundError - Search failures

Example:
    from lazyspf import AdjacencyGraph, shortest_path

    g = AdjacencyGraph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])
    edges = shortest_path(g, "A", "C")
    # [Arc(source='A', target='B', weight=1), Arc(source='B', target='C', weight=2)]

    # Stop at the closest vertex matching a predicate
    edges = shortest_path(g, "A", lambda v: v in {"B", "C"})
"""

from __future__ import annotations

from lazyspf import logging
from lazyspf._version import __version__
from lazyspf.algorithms.base import (
    InvalidWeightError,
    NoPathFoundError,
    PathError,
    VertexState,
    WeightPolicy,
)
from lazyspf.algorithms.heap import IndexedHeap, SearchCandidate
from lazyspf.algorithms.path_utils import path_cost, path_vertices
from lazyspf.algorithms.spf import shortest_path, shortest_path_summary
from lazyspf.algorithms.types import PathSummary, SearchStats
from lazyspf.config import SEARCH_CONFIG, SearchConfig
from lazyspf.graph import (
    AdjacencyGraph,
    Arc,
    BinaryTreeGraph,
    CycleGraph,
    Graph,
    GridGraph,
    NetworkXGraph,
    NumberLatticeGraph,
)
from lazyspf import cli

__all__ = [
    # Version
    "__version__",
    # Search
    "shortest_path",
    "shortest_path_summary",
    "path_cost",
    "path_vertices",
    "IndexedHeap",
    "SearchCandidate",
    # Graphs
    "Graph",
    "AdjacencyGraph",
    "Arc",
    "NetworkXGraph",
    "CycleGraph",
    "NumberLatticeGraph",
    "BinaryTreeGraph",
    "GridGraph",
    # Types
    "PathSummary",
    "SearchStats",
    "VertexState",
    "WeightPolicy",
    # Errors
    "PathError",
    "InvalidWeightError",
    "NoPathFoundError",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "cli",
    "logging",
]
