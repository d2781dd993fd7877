#!/usr/bin/env python3
"""
PacPath play CLI - run an agent through a maze template.

Usage:
    python scripts/play.py data/example_maze.txt --start 2 2 --target 8 8
    python scripts/play.py data/example_maze.txt --start 2 2 --target 8 8 --agent random --seed 7

Agents:
    chaser - Shortest non-backtracking path, re-planned every move
    random - Random forward edge baseline

Maze file format: one row per line, 'w' = wall, 'p' = path, 'g' = ghost box.

Exit codes: 0 won, 1 lost, 2 bad input.
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

from pacpath.agents import get_agent  # noqa: E402
from pacpath.config import DATA_DIR, LOG_LEVEL, MAX_STEPS  # noqa: E402
from pacpath.game import GameEngine  # noqa: E402
from pacpath.maze import GameMap, MazeGraph  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run an agent through a maze",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "maze",
        type=Path,
        nargs="?",
        default=DATA_DIR / "example_maze.txt",
        help="Maze template file (default: data/example_maze.txt)",
    )
    parser.add_argument("--start", type=int, nargs=2, required=True, metavar=("I", "J"), help="Start tile")
    parser.add_argument("--target", type=int, nargs=2, required=True, metavar=("I", "J"), help="Target tile")
    parser.add_argument(
        "--agent",
        type=str,
        default="chaser",
        choices=["chaser", "random"],
        help="Agent to use (default: chaser)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --agent random")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=MAX_STEPS,
        help=f"Maximum moves (default: {MAX_STEPS})",
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
        maze = MazeGraph(GameMap.from_template(args.maze.read_text(encoding="utf-8")))
        start = maze.closest_to(*args.start)
        target = maze.closest_to(*args.target)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    kwargs = {"seed": args.seed} if args.agent == "random" else {}
    agent = get_agent(args.agent, **kwargs)

    result = GameEngine(max_steps=args.max_steps).run(agent=agent, start=start, target=target)

    print(f"Agent:    {result.agent_name}")
    print(f"Route:    {start.loc} -> {target.loc}")
    print(f"Result:   {'WON' if result.won else 'LOST'} in {result.total_moves} moves")
    print(f"Distance: {result.total_distance:g} (optimal: {result.optimal_distance})")
    if result.efficiency is not None:
        print(f"Efficiency: {result.efficiency:.0%}")

    return 0 if result.won else 1


if __name__ == "__main__":
    sys.exit(main())
