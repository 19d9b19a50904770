"""Shortest-path-first (SPF) search over on-demand graphs.

Implements Dijkstra's algorithm against the :class:`~lazyspf.graph.Graph`
contract. Vertices are discovered lazily through ``graph.edges`` so the graph
may be infinite; the search only touches vertices closer to the start than
the destination (plus their immediate neighbours).

Notes:
    The search stops as soon as a vertex satisfying the destination is
    extracted from the priority queue. Extraction order is non-decreasing in
    cumulative weight, so no later vertex can offer a cheaper route to it.
    The goal vertex itself is never expanded.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from lazyspf.algorithms.base import (
    ZERO_WEIGHT,
    Destination,
    Edge,
    InvalidWeightError,
    NoPathFoundError,
    Vertex,
    VertexState,
)
from lazyspf.algorithms.heap import IndexedHeap, SearchCandidate
from lazyspf.algorithms.types import PathSummary, SearchStats
from lazyspf.config import SEARCH_CONFIG, SearchConfig
from lazyspf.graph.contract import Graph
from lazyspf.logging import get_logger

logger = get_logger(__name__)


def destination_predicate(destination: Destination) -> Callable[[Vertex], bool]:
    """Turn a destination into a predicate over vertices.

    Callables are used as-is; any other value is matched with ``==``.
    """
    if callable(destination):
        return destination
    return lambda vertex: vertex == destination


def _search(
    graph: Graph,
    start: Vertex,
    destination: Destination,
    config: SearchConfig,
) -> Tuple[SearchCandidate, SearchStats]:
    """Run Dijkstra from ``start`` until the destination is extracted.

    Returns:
        The goal candidate (head of the predecessor chain) and work counters.

    Raises:
        InvalidWeightError: On the first edge rejected by the weight policy.
        NoPathFoundError: If the frontier empties before the destination.
    """
    is_goal = destination_predicate(destination)
    is_valid_weight = config.is_valid_weight
    debug_checks = config.debug_checks
    progress_every = config.log_progress_every

    edges_of = graph.edges
    weight_of = graph.weight
    target_of = graph.target

    stats = SearchStats()
    heap = IndexedHeap()
    heap.insert(SearchCandidate(start, None, ZERO_WEIGHT, None))

    # Reused for every expansion
    out: List[Edge] = []

    logger.debug("SPF search started at vertex %r", start)
    while heap:
        best = heap.extract_min()
        stats.extracted += 1
        if debug_checks:
            heap.check_invariants()
        if progress_every and stats.extracted % progress_every == 0:
            logger.debug(
                "SPF progress: %d extracted, frontier %d, current weight %r",
                stats.extracted,
                len(heap),
                best.weight,
            )

        if is_goal(best.vertex):
            logger.debug(
                "SPF reached %r at weight %r after %d extractions",
                best.vertex,
                best.weight,
                stats.extracted,
            )
            return best, stats

        source = best.vertex
        out.clear()
        edges_of(source, out)
        for edge in out:
            stats.relaxed += 1
            edge_weight = weight_of(edge, source)
            if not is_valid_weight(edge_weight):
                logger.debug(
                    "SPF aborted: edge %r from %r has weight %r",
                    edge,
                    source,
                    edge_weight,
                )
                raise InvalidWeightError(edge, source, edge_weight)

            total = best.weight + edge_weight
            neighbor = target_of(edge)
            state, idx = heap.lookup(neighbor)
            if state == VertexState.FINALIZED:
                continue
            if state == VertexState.UNSEEN:
                heap.insert(SearchCandidate(neighbor, edge, total, best))
                stats.inserted += 1
            elif total < heap[idx].weight:
                heap.decrease_key(neighbor, total, edge, best)
                stats.decreased += 1
            else:
                continue
            if debug_checks:
                heap.check_invariants()

    logger.debug(
        "SPF found no path from %r after %d extractions", start, stats.extracted
    )
    raise NoPathFoundError(start)


def _unwind(goal: SearchCandidate) -> Tuple[List[Edge], List[Vertex]]:
    """Collect edges and vertices along the predecessor chain, start first."""
    edges: List[Edge] = []
    vertices: List[Vertex] = [goal.vertex]
    node: Optional[SearchCandidate] = goal
    while node.predecessor is not None:
        edges.append(node.edge)
        node = node.predecessor
        vertices.append(node.vertex)
    edges.reverse()
    vertices.reverse()
    return edges, vertices


def shortest_path(
    graph: Graph,
    start: Vertex,
    destination: Destination,
    *,
    config: Optional[SearchConfig] = None,
) -> List[Edge]:
    """Find a minimum-weight path from ``start`` to ``destination``.

    Args:
        graph: Graph implementing the access contract.
        start: Vertex the path leaves from.
        destination: Target vertex, or a predicate over vertices. With a
            predicate, the closest matching vertex is chosen.
        config: Search configuration. Defaults to ``SEARCH_CONFIG``.

    Returns:
        Edges from ``start`` to the destination in travel order. Empty when
        ``start`` already satisfies the destination. Among several paths of
        equal weight, which one is returned is unspecified.

    Raises:
        InvalidWeightError: If an edge with a rejected weight is examined
            before the destination is reached.
        NoPathFoundError: If no vertex reachable from ``start`` satisfies the
            destination.
    """
    goal, _ = _search(graph, start, destination, config or SEARCH_CONFIG)
    edges, _ = _unwind(goal)
    return edges


def shortest_path_summary(
    graph: Graph,
    start: Vertex,
    destination: Destination,
    *,
    config: Optional[SearchConfig] = None,
) -> PathSummary:
    """Like :func:`shortest_path`, also returning vertices, cost and counters.

    Raises:
        InvalidWeightError: See :func:`shortest_path`.
        NoPathFoundError: See :func:`shortest_path`.
    """
    goal, stats = _search(graph, start, destination, config or SEARCH_CONFIG)
    edges, vertices = _unwind(goal)
    return PathSummary(edges=edges, vertices=vertices, cost=goal.weight, stats=stats)
