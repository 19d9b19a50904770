"""Benchmark lazyspf shortest-path searches against NetworkX.

This script builds random directed multigraphs of increasing size and
measures, for each size, three ways of computing one source-destination
shortest path:

- adjacency: `shortest_path` on an `AdjacencyGraph`
- adapter: `shortest_path` on the same graph through `NetworkXGraph`
- networkx: `networkx.dijkstra_path` on the `MultiDiGraph`

It also times searches on implicit graphs (unbounded grid, number lattice)
that NetworkX cannot represent without materializing them.

Run examples:

  python -m dev.bench_spf --sizes 100 1000 5000 --degree 8

  python -m dev.bench_spf --runs 5 --seed 3

Notes:
- The script writes no files. Results are printed as a table.
"""

from __future__ import annotations

import argparse
import gc
import random
import statistics
import time
from typing import Any, Callable, Dict, List, Sequence, Tuple

import networkx as nx

from lazyspf.algorithms.spf import shortest_path
from lazyspf.graph import AdjacencyGraph, GridGraph, NetworkXGraph, NumberLatticeGraph


def _time_func(func: Callable[[], Any], runs: int) -> Dict[str, float]:
    """Time ``func`` over ``runs`` calls with GC disabled; return ms statistics."""
    gc_was_enabled = gc.isenabled()
    gc.disable()
    try:
        gc.collect()
        func()  # warm-up
        samples = []
        for _ in range(runs):
            start = time.perf_counter()
            func()
            samples.append((time.perf_counter() - start) * 1000.0)
        return {
            "median": statistics.median(samples),
            "min": min(samples),
        }
    finally:
        if gc_was_enabled:
            gc.enable()


def _random_graphs(
    num_nodes: int, degree: int, rng: random.Random
) -> Tuple[AdjacencyGraph, nx.MultiDiGraph]:
    g = AdjacencyGraph()
    gnx = nx.MultiDiGraph()
    for node in range(num_nodes):
        g.add_vertex(node)
        gnx.add_node(node)
    for _ in range(num_nodes * degree):
        src = rng.randrange(num_nodes)
        dst = rng.randrange(num_nodes)
        cost = rng.randint(1, 100)
        g.add_edge(src, dst, cost)
        gnx.add_edge(src, dst, cost=cost)
    return g, gnx


def _bench_random(
    sizes: Sequence[int], degree: int, runs: int, seed: int
) -> List[List[str]]:
    rng = random.Random(seed)
    rows = []
    for size in sizes:
        g, gnx = _random_graphs(size, degree, rng)
        adapter = NetworkXGraph(gnx)
        src, dst = 0, size - 1
        if not nx.has_path(gnx, src, dst):
            print(f"   skipping size {size}: no path {src} -> {dst}")
            continue
        for label, func in (
            ("adjacency", lambda: shortest_path(g, src, dst)),
            ("adapter", lambda: shortest_path(adapter, src, dst)),
            ("networkx", lambda: nx.dijkstra_path(gnx, src, dst, weight="cost")),
        ):
            stats = _time_func(func, runs)
            rows.append(
                [
                    f"random n={size}",
                    label,
                    f"{stats['median']:.3f}",
                    f"{stats['min']:.3f}",
                ]
            )
    return rows


def _bench_implicit(runs: int) -> List[List[str]]:
    grid = GridGraph(diagonal=True)
    lattice = NumberLatticeGraph()
    rows = []
    for label, func in (
        ("grid (0,0)->(60,40)", lambda: shortest_path(grid, (0, 0), (60, 40))),
        ("lattice 100->1000", lambda: shortest_path(lattice, 100, 1000)),
    ):
        stats = _time_func(func, runs)
        rows.append([label, "implicit", f"{stats['median']:.3f}", f"{stats['min']:.3f}"])
    return rows


def _format_table(headers: List[str], rows: List[List[str]]) -> str:
    widths = [
        max(len(str(row[i])) for row in [headers] + rows) for i in range(len(headers))
    ]

    def fmt(row: List[str]) -> str:
        return "   " + " | ".join(f"{item:<{widths[i]}}" for i, item in enumerate(row))

    lines = [fmt(headers), "   " + "-+-".join("-" * w for w in widths)]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[100, 1000, 5000], help="Node counts"
    )
    parser.add_argument("--degree", type=int, default=8, help="Average out-degree")
    parser.add_argument("--runs", type=int, default=10, help="Timed runs per case")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    rows = _bench_random(args.sizes, args.degree, args.runs, args.seed)
    rows.extend(_bench_implicit(args.runs))
    print(_format_table(["case", "engine", "median ms", "min ms"], rows))


if __name__ == "__main__":
    main()
