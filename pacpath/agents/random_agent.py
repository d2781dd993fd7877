"""
Random agent baseline - picks a forward edge uniformly at random.
"""

from __future__ import annotations

import random

from pacpath.agents.base import Agent, AgentContext, non_reversing_edges
from pacpath.graph.base import Edge


class RandomAgent(Agent):
    """
    Baseline agent that wanders without ever turning straight back.

    Used to establish a lower bound on performance, and as the movement of
    a frightened ghost.
    """

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility
        """
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return "random"

    @property
    def description(self) -> str:
        return "Uniformly random edge, never reversing unless at a dead end"

    def choose_edge(self, context: AgentContext) -> Edge | None:
        """Pick a random non-reversing edge."""
        candidates = non_reversing_edges(context)
        if not candidates:
            return None

        # Always step onto the target if it is adjacent
        for edge in candidates:
            if edge.dst == context.target:
                return edge

        return self._rng.choice(candidates)
