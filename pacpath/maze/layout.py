"""
Tile grids that maze graphs are built from.

A GameMap pairs a grid of tile types with a grid of elevations. Both are
numpy arrays of shape (width, height), indexed [i, j] where i is the column
(increasing to the right) and j is the row (increasing down).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from pacpath.config import TILE_CHARS


class TileType(IntEnum):
    """What occupies a tile of the grid."""

    WALL = 0
    PATH = 1
    GHOSTBOX = 2


@dataclass(frozen=True, eq=False)
class GameMap:
    """
    Tile types and elevations for one maze.

    Attributes:
        types: Integer array of TileType values, shape (width, height)
        elevations: Float array, same shape as types
    """

    types: np.ndarray
    elevations: np.ndarray

    def __post_init__(self) -> None:
        if self.types.ndim != 2:
            raise ValueError(f"Tile types must be a 2-D grid, got shape {self.types.shape}")
        if self.types.shape != self.elevations.shape:
            raise ValueError(
                f"Tile types {self.types.shape} and elevations {self.elevations.shape} differ in shape"
            )

    @property
    def width(self) -> int:
        return self.types.shape[0]

    @property
    def height(self) -> int:
        return self.types.shape[1]

    def is_path(self, i: int, j: int) -> bool:
        return bool(self.types[i, j] == TileType.PATH)

    @classmethod
    def from_template(cls, template: str, elevations: np.ndarray | None = None) -> GameMap:
        """
        Build a map from rows of 'w' (wall), 'p' (path) and 'g' (ghost box).

        Args:
            template: One row of the maze per non-blank line, top row first
            elevations: Optional (width, height) array; zeros if omitted

        Raises:
            ValueError: On unknown characters, ragged rows, or an elevation
                grid of the wrong shape
        """
        rows = [line.strip() for line in template.splitlines() if line.strip()]
        if not rows:
            raise ValueError("Maze template is empty")

        width = len(rows[0])
        grid = []
        for j, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {j} has {len(row)} tiles, expected {width}")
            try:
                grid.append([TileType[TILE_CHARS[c]] for c in row])
            except KeyError as e:
                raise ValueError(f"Row {j}: unknown tile character {e.args[0]!r}") from None

        # Rows are read top to bottom; transpose so the first index is the column
        types = np.array(grid, dtype=np.int8).T
        if elevations is None:
            elevations = np.zeros(types.shape, dtype=np.float64)
        return cls(types=types, elevations=np.asarray(elevations, dtype=np.float64))
