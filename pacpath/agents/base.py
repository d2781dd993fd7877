"""
Agent base class and protocol for maze-walking players.

All agents must implement choose_edge() to decide which edge to take next.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from pacpath.graph.base import Edge


@dataclass
class AgentContext:
    """
    Context passed to agents for decision making.

    Attributes:
        current: Vertex the agent is standing on
        previous_edge: Edge the agent arrived by (None at the very start)
        target: Vertex the agent is trying to reach
        step_count: Number of moves made so far
    """

    current: Any
    previous_edge: Edge | None
    target: Any
    step_count: int = 0


def non_reversing_edges(context: AgentContext) -> list[Edge]:
    """
    Outgoing edges of the current vertex that do not lead straight back.

    At a dead end every outgoing edge reverses the previous one, so all of
    them are returned rather than none.
    """
    edges = list(context.current.outgoing_edges())
    if context.previous_edge is None:
        return edges
    forward = [e for e in edges if e.dst != context.previous_edge.src]
    return forward or edges


class Agent(ABC):
    """
    Abstract base class for agents that move along graph edges.

    Agents receive their position and target and must choose an outgoing
    edge. Target selection (where to chase, where to flee) belongs to the
    caller.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the agent (e.g., 'chaser', 'random')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the agent's strategy."""
        ...

    @abstractmethod
    def choose_edge(self, context: AgentContext) -> Edge | None:
        """
        Choose which edge to take next.

        Args:
            context: Current position, arrival edge and target

        Returns:
            An edge leaving context.current, or None if the agent is stuck
            on a vertex with no outgoing edges
        """
        ...

    def on_game_start(self, start: Any, target: Any) -> None:
        """Called when a new game begins. Override for setup."""
        pass

    def on_game_end(self, won: bool, path: list[Any]) -> None:
        """Called when game ends. Override for cleanup."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
