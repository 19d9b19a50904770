"""Command-line interface for lazyspf."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional, Tuple

import networkx as nx

from lazyspf.algorithms.base import PathError, WeightPolicy
from lazyspf.algorithms.spf import shortest_path_summary
from lazyspf.algorithms.types import PathSummary
from lazyspf.config import SearchConfig
from lazyspf.graph.contract import Graph
from lazyspf.graph.implicit import (
    BinaryTreeGraph,
    CycleGraph,
    GridGraph,
    NumberLatticeGraph,
)
from lazyspf.graph.nx import NetworkXGraph
from lazyspf.logging import get_logger, set_global_log_level, verbosity_level

logger = get_logger(__name__)

GRAPH_KINDS = ("cycle", "lattice", "tree", "grid")


def _parse_cell(text: str) -> Tuple[int, int]:
    """Parse an ``x,y`` grid cell."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Expected a grid cell 'x,y', got '{text}'")
    return int(parts[0]), int(parts[1])


def _format_cost(value: Any) -> str:
    """Format a path cost with thousands separators, dropping a trailing '.0'."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.4f}".rstrip("0").rstrip(".")


def _build_graph(args: argparse.Namespace) -> Tuple[Graph, Any, Any]:
    """Create the graph and parse the endpoints for the ``path`` command."""
    if args.edgelist is not None:
        if not args.edgelist.exists():
            raise FileNotFoundError(f"Edge list not found: {args.edgelist}")
        gnx = nx.read_weighted_edgelist(
            args.edgelist, create_using=nx.DiGraph, nodetype=str
        )
        # read_weighted_edgelist stores weights under "weight"
        return NetworkXGraph(gnx, weight="weight"), args.start, args.dest

    if args.graph == "grid":
        graph: Graph = GridGraph(
            width=args.size, height=args.size, diagonal=args.diagonal
        )
        return graph, _parse_cell(args.start), _parse_cell(args.dest)

    start, dest = int(args.start), int(args.dest)
    if args.graph == "cycle":
        graph = CycleGraph(
            args.size if args.size is not None else 10,
            closed=not args.open,
            bidirectional=args.bidirectional,
        )
    elif args.graph == "lattice":
        graph = NumberLatticeGraph()
    else:
        graph = BinaryTreeGraph()
    return graph, start, dest


def _print_summary(summary: PathSummary, elapsed: float) -> None:
    hops = len(summary.edges)
    print(f"Path: {' -> '.join(str(v) for v in summary.vertices)}")
    print(f"   Hops: {hops}")
    print(f"   Cost: {_format_cost(summary.cost)}")
    stats = summary.stats
    print(
        f"   Search: {stats.extracted} extracted, {stats.relaxed} relaxed, "
        f"{stats.decreased} decreased ({elapsed * 1000:.2f} ms)"
    )


def _run_path(args: argparse.Namespace) -> None:
    """Run a single shortest-path search and print the outcome."""
    try:
        graph, start, dest = _build_graph(args)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    config = SearchConfig(
        weight_policy=(
            WeightPolicy.STRICTLY_POSITIVE
            if args.strict_positive
            else WeightPolicy.NON_NEGATIVE
        ),
        debug_checks=args.debug_checks,
    )

    logger.debug(
        "Searching %s from %r to %r", args.edgelist or args.graph, start, dest
    )
    t0 = perf_counter()
    try:
        summary = shortest_path_summary(graph, start, dest, config=config)
    except PathError as exc:
        logger.error("Search failed: %s", exc)
        sys.exit(1)
    except (KeyError, ValueError) as exc:
        logger.error("Invalid vertex: %s", exc)
        sys.exit(1)
    elapsed = perf_counter() - t0

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        _print_summary(summary, elapsed)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``lazyspf`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="lazyspf",
        description="Find shortest paths in on-demand graphs.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{path}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser(
        "path", help="Find a shortest path between two vertices"
    )
    path_parser.add_argument("start", help="Start vertex ('x,y' for grids)")
    path_parser.add_argument("dest", help="Destination vertex ('x,y' for grids)")
    source = path_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--graph",
        "-g",
        choices=GRAPH_KINDS,
        default="cycle",
        help="Built-in generated graph to search (default: cycle)",
    )
    source.add_argument(
        "--edgelist",
        "-e",
        type=Path,
        default=None,
        help="Weighted edge list file ('u v weight' per line), read as directed",
    )
    path_parser.add_argument(
        "--size",
        "-n",
        type=int,
        default=None,
        help="Vertex count for 'cycle' (default 10), side length for 'grid'",
    )
    path_parser.add_argument(
        "--open",
        action="store_true",
        help="Drop the closing edge of 'cycle', leaving a forward-only chain",
    )
    path_parser.add_argument(
        "--bidirectional",
        action="store_true",
        help="Add reverse edges to 'cycle'",
    )
    path_parser.add_argument(
        "--diagonal", action="store_true", help="Allow diagonal moves on 'grid'"
    )
    path_parser.add_argument(
        "--strict-positive",
        action="store_true",
        help="Reject zero-weight edges as well as negative ones",
    )
    path_parser.add_argument(
        "--debug-checks",
        action="store_true",
        help="Verify priority queue invariants after every operation",
    )
    path_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(verbosity_level(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "path":
        _run_path(args)


if __name__ == "__main__":
    main()
