"""
Chaser agent that follows the shortest non-backtracking path.

This is how every ghost moves once its target tile is chosen: re-plan from
the current vertex each tick and take the first edge of the path.
"""

from __future__ import annotations

import logging
from typing import Any

from pacpath.agents.base import Agent, AgentContext, non_reversing_edges
from pacpath.graph.base import Edge
from pacpath.graph.pathfinding import shortest_non_backtracking_path

logger = logging.getLogger(__name__)


class ChaserAgent(Agent):
    """
    Agent that moves one edge along the shortest non-backtracking path to its target.

    Re-plans on every call, so it adapts immediately when the target moves.
    When no such path exists it keeps moving forward rather than stopping.
    """

    def __init__(self) -> None:
        self._replans = 0
        self._fallbacks = 0

    @property
    def name(self) -> str:
        return "chaser"

    @property
    def description(self) -> str:
        return "Shortest non-backtracking path (Dijkstra), re-planned every move"

    def choose_edge(self, context: AgentContext) -> Edge | None:
        """Take the first edge of the best path, or any forward edge if there is none."""
        self._replans += 1
        path = shortest_non_backtracking_path(
            context.current, context.target, context.previous_edge
        )

        if path:
            return path[0]

        if path is None:
            self._fallbacks += 1
            logger.warning(
                f"Chaser: no non-backtracking path from {context.current!r} "
                f"to {context.target!r}, moving on"
            )

        # Already on target, or unreachable: keep moving without reversing
        candidates = non_reversing_edges(context)
        return candidates[0] if candidates else None

    def get_stats(self) -> dict[str, int]:
        """Number of plans computed and how many found no path."""
        return {"replans": self._replans, "fallback_count": self._fallbacks}

    def on_game_start(self, start: Any, target: Any) -> None:
        self._replans = 0
        self._fallbacks = 0
