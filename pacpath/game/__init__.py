"""
Game engine module.

Provides game state management and execution:
- GameState: Tracks current game state
- GameStep: Records a single move
- GameResult: Complete game record
- GameEngine: Runs games with agents
"""

from pacpath.game.engine import GameEngine
from pacpath.game.state import GameResult, GameState, GameStep

__all__ = [
    "GameEngine",
    "GameState",
    "GameStep",
    "GameResult",
]
