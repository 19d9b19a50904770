"""Sample graphs and reference helpers shared by the algorithm tests."""

from __future__ import annotations

import random
from heapq import heappop, heappush

import networkx as nx
import pytest

from lazyspf.graph import (
    AdjacencyGraph,
    BinaryTreeGraph,
    CycleGraph,
    NumberLatticeGraph,
)


def reference_distance(graph, start, is_goal, limit=1_000_000):
    """Plain heapq Dijkstra with lazy deletion over the graph contract.

    Independent of IndexedHeap; returns the distance to the closest goal
    vertex or None when no goal is reachable within ``limit`` pops.
    """
    dist = {start: 0}
    done = set()
    pq = [(0, 0, start)]
    counter = 1
    out = []
    while pq and limit:
        limit -= 1
        d, _, v = heappop(pq)
        if v in done:
            continue
        done.add(v)
        if is_goal(v):
            return d
        out.clear()
        graph.edges(v, out)
        for e in out:
            u = graph.target(e)
            nd = d + graph.weight(e, v)
            if u not in dist or nd < dist[u]:
                dist[u] = nd
                heappush(pq, (nd, counter, u))
                counter += 1
    return None


def create_random_graphs(num_nodes, num_edges, seed, max_cost=10, min_cost=0):
    """
    Build the same random directed multigraph twice.

    Returns:
        (AdjacencyGraph, networkx.MultiDiGraph) with identical edges; the
        NetworkX copy stores weights under "cost".
    """
    rng = random.Random(seed)
    g = AdjacencyGraph()
    gnx = nx.MultiDiGraph()
    for node in range(num_nodes):
        g.add_vertex(node)
        gnx.add_node(node)
    for _ in range(num_edges):
        src = rng.randrange(num_nodes)
        dst = rng.randrange(num_nodes)
        cost = rng.randint(min_cost, max_cost)
        g.add_edge(src, dst, cost)
        gnx.add_edge(src, dst, cost=cost)
    return g, gnx


@pytest.fixture
def line1():
    # Metric:
    #      [1]      [1,1,2]
    #  A◄───────►B◄───────►C
    #
    return AdjacencyGraph.from_edges(
        [
            ("A", "B", 1),
            ("B", "A", 1),
            ("B", "C", 1),
            ("C", "B", 1),
            ("B", "C", 1),
            ("C", "B", 1),
            ("B", "C", 2),
            ("C", "B", 2),
        ]
    )


@pytest.fixture
def square1():
    # Metric:
    #      [1]        [1]
    #   A──────►B──────►C
    #   │               ▲
    #   │   [2]    [2]  │
    #   └──────►D───────┘
    #
    return AdjacencyGraph.from_edges(
        [
            ("A", "B", 1),
            ("B", "C", 1),
            ("A", "D", 2),
            ("D", "C", 2),
        ]
    )


@pytest.fixture
def graph3():
    # Parallel edges and a cheaper detour that is discovered late:
    # A reaches D directly at 5, but A->B->C->D and A->B->C->F->D cost 4.
    # D is queued at 5 and later decreased to 4.
    return AdjacencyGraph.from_edges(
        [
            ("A", "B", 1),
            ("A", "B", 1),
            ("A", "B", 3),
            ("B", "C", 1),
            ("B", "C", 2),
            ("C", "D", 2),
            ("A", "E", 1),
            ("E", "C", 1),
            ("A", "D", 5),
            ("C", "F", 1),
            ("F", "D", 1),
        ]
    )


@pytest.fixture
def cycle10():
    return CycleGraph(10)


@pytest.fixture
def chain10():
    return CycleGraph(10, closed=False)


@pytest.fixture
def lattice():
    return NumberLatticeGraph()


@pytest.fixture
def tree():
    return BinaryTreeGraph()


@pytest.fixture
def reference():
    return reference_distance


@pytest.fixture
def random_graphs():
    return create_random_graphs
