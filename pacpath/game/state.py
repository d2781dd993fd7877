"""
Game state dataclasses for tracking an agent's walk through a maze.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pacpath.graph.base import Edge


@dataclass
class GameStep:
    """
    Records a single move along one edge.

    Attributes:
        from_vertex: Vertex the move started at
        to_vertex: Vertex the move ended at
        edge: Edge that was traversed
        decision_time_ms: Time agent took to decide (milliseconds)
        step_number: 1-indexed step number
    """

    from_vertex: Any
    to_vertex: Any
    edge: Edge
    decision_time_ms: float
    step_number: int


@dataclass
class GameResult:
    """
    Complete record of a finished game.

    Attributes:
        start: Starting vertex
        target: Target vertex
        path: Vertices visited, including start and end
        steps: Detailed record of each step
        won: Whether target was reached
        total_moves: Number of edges traversed
        total_distance: Summed weight of the traversed edges
        total_time_ms: Total game time in milliseconds
        agent_name: Name of the agent that played
        optimal_distance: Shortest non-backtracking distance, if known
        timestamp: When the game was played
    """

    start: Any
    target: Any
    path: list[Any]
    steps: list[GameStep]
    won: bool
    total_moves: int
    total_distance: float
    total_time_ms: float
    agent_name: str
    optimal_distance: float | None = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def efficiency(self) -> float | None:
        """
        Ratio of optimal distance to walked distance.

        Returns None if the optimal distance is unknown or the game was lost.
        Higher is better (1.0 = optimal).
        """
        if not self.won or self.optimal_distance is None:
            return None
        if self.total_distance == 0:
            return 1.0
        return self.optimal_distance / self.total_distance


@dataclass
class GameState:
    """
    Mutable state during an active game.

    Attributes:
        start: Starting vertex
        target: Target vertex
        current: Vertex the agent is on
        previous_edge: Edge the agent last arrived by
        path: Vertices visited so far (including current)
        steps: Steps recorded so far
        start_time_ms: Game start timestamp (epoch ms)
    """

    start: Any
    target: Any
    current: Any
    previous_edge: Edge | None = None
    path: list[Any] = field(default_factory=list)
    steps: list[GameStep] = field(default_factory=list)
    start_time_ms: float = 0.0

    def __post_init__(self) -> None:
        if not self.path:
            self.path = [self.start]

    @property
    def move_count(self) -> int:
        """Number of moves made so far."""
        return len(self.path) - 1

    @property
    def total_distance(self) -> float:
        """Summed weight of all edges traversed so far."""
        return sum(step.edge.weight for step in self.steps)

    @property
    def is_won(self) -> bool:
        """Whether we've reached the target."""
        return self.current == self.target

    def record_step(self, edge: Edge, decision_time_ms: float) -> None:
        """
        Record a move along edge and update state.

        Raises:
            ValueError: If edge does not leave the current vertex
        """
        if edge.src != self.current:
            raise ValueError(f"Edge {edge!r} does not leave current vertex {self.current!r}")

        step = GameStep(
            from_vertex=self.current,
            to_vertex=edge.dst,
            edge=edge,
            decision_time_ms=decision_time_ms,
            step_number=len(self.steps) + 1,
        )
        self.steps.append(step)
        self.path.append(edge.dst)
        self.current = edge.dst
        self.previous_edge = edge

    def to_result(
        self,
        agent_name: str,
        total_time_ms: float,
        optimal_distance: float | None = None,
    ) -> GameResult:
        """Convert to a GameResult."""
        return GameResult(
            start=self.start,
            target=self.target,
            path=list(self.path),
            steps=list(self.steps),
            won=self.is_won,
            total_moves=self.move_count,
            total_distance=self.total_distance,
            total_time_ms=total_time_ms,
            agent_name=agent_name,
            optimal_distance=optimal_distance,
        )
