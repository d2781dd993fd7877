"""
Headless game engine for running an agent through a maze graph.

One tick is one edge traversal. There is no rendering, input or frame
timing; the engine only drives the agent's decision loop and records what
happened.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pacpath.agents.base import AgentContext
from pacpath.config import MAX_STEPS
from pacpath.game.state import GameResult, GameState
from pacpath.graph.pathfinding import path_info

if TYPE_CHECKING:
    from pacpath.agents.base import Agent
    from pacpath.graph.base import Edge

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Runs an agent from a start vertex until it reaches a target.

    The engine handles:
    - Building the agent's context each tick
    - Validating that the chosen edge leaves the current vertex
    - Recording game state and results, including the optimal distance
    """

    def __init__(self, max_steps: int = MAX_STEPS) -> None:
        """
        Initialize the game engine.

        Args:
            max_steps: Maximum moves before a game is lost
        """
        self._max_steps = max_steps

    def run(
        self,
        agent: Agent,
        start: Any,
        target: Any,
        previous_edge: Edge | None = None,
    ) -> GameResult:
        """
        Run a complete game.

        Args:
            agent: The agent to play the game
            start: Starting vertex
            target: Target vertex
            previous_edge: Edge the agent is considered to have arrived by

        Returns:
            GameResult with full game record

        Raises:
            ValueError: If the agent chooses an edge not leaving its vertex,
                or previous_edge does not end at start
        """
        logger.info(f"Starting game: {start!r} -> {target!r} with {agent.name}")

        optimal = path_info(start, previous_edge).get(target)
        optimal_distance = optimal.distance if optimal is not None else None

        state = GameState(start=start, target=target, current=start, previous_edge=previous_edge)
        state.start_time_ms = time.time() * 1000

        agent.on_game_start(start, target)

        while not state.is_won and state.move_count < self._max_steps:
            context = AgentContext(
                current=state.current,
                previous_edge=state.previous_edge,
                target=target,
                step_count=state.move_count,
            )

            decision_start = time.time() * 1000
            chosen = agent.choose_edge(context)
            decision_time = time.time() * 1000 - decision_start

            if chosen is None:
                logger.warning(f"Agent {agent.name} is stuck at {state.current!r}")
                break

            if chosen.src != state.current:
                logger.error(f"Agent chose invalid edge: {chosen!r}")
                raise ValueError(f"Invalid edge choice: {chosen!r} does not leave {state.current!r}")

            logger.debug(f"Step {state.move_count + 1}: {state.current!r} -> {chosen.dst!r}")
            state.record_step(chosen, decision_time)

        total_time = time.time() * 1000 - state.start_time_ms
        result = state.to_result(agent.name, total_time, optimal_distance)

        agent.on_game_end(result.won, result.path)

        if result.won:
            logger.info(
                f"Won in {result.total_moves} moves, distance {result.total_distance:g} "
                f"(optimal {optimal_distance})"
            )
        else:
            logger.info(f"Lost after {result.total_moves} moves")

        return result
