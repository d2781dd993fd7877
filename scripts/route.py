#!/usr/bin/env python3
"""
PacPath route CLI - shortest non-backtracking path in a text-described graph.

Usage:
    python scripts/route.py data/example_graph.txt --start A --target G
    python scripts/route.py data/example_graph.txt --start D --target G --previous C

Graph file format (one edge per line, weight optional):
    A -> B 2      directed edge
    A -- C 6      edges in both directions

Exit codes: 0 path found, 1 no path, 2 bad input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

load_dotenv(project_root / ".env")

from pacpath.config import DATA_DIR, LOG_LEVEL  # noqa: E402
from pacpath.graph import SimpleGraph, shortest_non_backtracking_path  # noqa: E402

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the shortest non-backtracking path in a graph file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "graph",
        type=Path,
        nargs="?",
        default=DATA_DIR / "example_graph.txt",
        help="Text graph file (default: data/example_graph.txt)",
    )
    parser.add_argument("--start", type=str, required=True, help="Label of the source vertex")
    parser.add_argument("--target", type=str, required=True, help="Label of the destination vertex")
    parser.add_argument(
        "--previous",
        type=str,
        default=None,
        help="Label of the vertex we just arrived from (forbids stepping straight back)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=LOG_LEVEL,
        help=f"Logging level (default: {LOG_LEVEL})",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        graph = SimpleGraph.from_text(args.graph.read_text(encoding="utf-8"))
        src = graph.get_vertex(args.start)
        dst = graph.get_vertex(args.target)
        came_from = graph.get_vertex(args.previous) if args.previous is not None else None
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 2

    previous_edge = None
    if came_from is not None:
        previous_edge = graph.get_edge(came_from, src)
        if previous_edge is None:
            logger.error(f"No edge {args.previous} -> {args.start} in {args.graph}")
            return 2

    path = shortest_non_backtracking_path(src, dst, previous_edge)
    if path is None:
        print(f"No non-backtracking path from {args.start} to {args.target}")
        return 1

    labels = [src.label] + [edge.dst.label for edge in path]
    total = sum(edge.weight for edge in path)
    print(f"{' -> '.join(labels)}  (weight {total:g}, {len(path)} edges)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
