"""
Maze module.

Builds the searchable graph of a tile maze:
- TileType / GameMap: tile grid and elevations
- Direction / TilePos: grid geometry
- MazeVertex / MazeEdge / MazeGraph: the graph agents path-find over
"""

from pacpath.maze.graph import (
    Direction,
    MazeEdge,
    MazeGraph,
    MazeVertex,
    TilePos,
    edge_weight,
)
from pacpath.maze.layout import GameMap, TileType

__all__ = [
    "Direction",
    "GameMap",
    "MazeEdge",
    "MazeGraph",
    "MazeVertex",
    "TilePos",
    "TileType",
    "edge_weight",
]
