"""Command-line interface for spfgraph."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

from spfgraph.config import DEMO_CONFIG, DemoConfig
from spfgraph.exceptions import SpfGraphError
from spfgraph.graph import Graph
from spfgraph.logging import get_logger, level_for_flags, set_global_log_level
from spfgraph.results import ShortestPathResult

logger = get_logger(__name__)


def _parse_edge(text: str) -> Tuple[int, int, float]:
    """Parse a ``U,V,W`` edge triple for argparse.

    The weight stays an ``int`` when it has no fractional part in the input.
    """
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected U,V,W, got {text!r}")
    try:
        src, dst = int(parts[0]), int(parts[1])
        weight = float(parts[2])
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected U,V,W, got {text!r}") from None
    if weight.is_integer() and "." not in parts[2]:
        weight = int(weight)
    return src, dst, weight


def _format_path(path: Optional[List[int]], config: DemoConfig) -> str:
    if path is None:
        return config.no_path_label
    return " -> ".join(str(v) for v in path)


def format_result(
    result: ShortestPathResult, config: DemoConfig = DEMO_CONFIG
) -> List[str]:
    """Return one ``<v>, {Distance: <d>, Path: <path>}`` line per vertex."""
    lines = []
    for v in range(result.size):
        dist = result.get_distance(v)
        dist_text = config.unreachable_label if dist is None else str(dist)
        path_text = _format_path(result.get_path(v), config)
        lines.append(f"{v}, {{Distance: {dist_text}, Path: {path_text}}}")
    return lines


def _result_to_json(result: ShortestPathResult) -> Dict[str, Any]:
    data = result.to_dict()
    data["paths"] = [result.get_path(v) for v in range(result.size)]
    return data


def _emit(result: ShortestPathResult, as_json: bool, config: DemoConfig) -> None:
    if as_json:
        print(json.dumps(_result_to_json(result), indent=2))
    else:
        print("\n".join(format_result(result, config)))


def _run_demo(as_json: bool, config: DemoConfig = DEMO_CONFIG) -> None:
    graph = config.build_graph()
    logger.info(
        f"Demo graph: {graph.size} vertices, {graph.num_edges()} edges, "
        f"source {config.source}"
    )
    _emit(graph.dijkstra(config.source), as_json, config)


def _run_graph(
    size: int,
    source: int,
    edges: Sequence[Tuple[int, int, float]],
    undirected_edges: Sequence[Tuple[int, int, float]],
    as_json: bool,
) -> None:
    try:
        graph = Graph(size)
        for src, dst, weight in edges:
            graph.add_edge(src, dst, weight)
        for src, dst, weight in undirected_edges:
            graph.add_undirected_edge(src, dst, weight)
        logger.info(
            f"Graph: {graph.size} vertices, {graph.num_edges()} edges, source {source}"
        )
        result = graph.dijkstra(source)
    except SpfGraphError as e:
        logger.error(f"Failed to compute shortest paths: {type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)

    _emit(result, as_json, DEMO_CONFIG)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``spfgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="spfgraph",
        description="Compute single-source shortest paths on a weighted digraph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{demo,run}",
        help="Available commands",
    )

    demo_parser = subparsers.add_parser(
        "demo", help="Run shortest paths on the built-in 10-vertex example"
    )

    run_parser = subparsers.add_parser(
        "run", help="Run shortest paths on a graph given as edge triples"
    )
    run_parser.add_argument(
        "--size", "-n", type=int, required=True, help="Number of vertices"
    )
    run_parser.add_argument(
        "--source", "-s", type=int, default=0, help="Source vertex (default: 0)"
    )
    run_parser.add_argument(
        "--edge",
        "-e",
        type=_parse_edge,
        action="append",
        default=[],
        metavar="U,V,W",
        help="Directed edge U->V with weight W (repeatable)",
    )
    run_parser.add_argument(
        "--undirected-edge",
        "-u",
        type=_parse_edge,
        action="append",
        default=[],
        metavar="U,V,W",
        help="Undirected edge U<->V with weight W (repeatable)",
    )

    for p in (demo_parser, run_parser):
        p.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    if args.command == "demo":
        _run_demo(args.json)
    elif args.command == "run":
        _run_graph(
            size=args.size,
            source=args.source,
            edges=args.edge,
            undirected_edges=args.undirected_edge,
            as_json=args.json,
        )


if __name__ == "__main__":
    main()
