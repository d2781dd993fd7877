"""
Graph over the path tiles of a maze.

Every PATH tile becomes a vertex, joined to each orthogonally adjacent PATH
tile by a directed edge. Coordinates wrap around the grid borders, so a path
tile on the left edge connects to one on the right edge of the same row
("tunnel" edges). Edge weights grow when climbing and shrink when
descending, based on tile elevations.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np

from pacpath.config import (
    BASE_EDGE_WEIGHT,
    ELEVATION_CLAMP,
    ELEVATION_SLOPE,
    LATTICE_OFFSET,
    LATTICE_PITCH,
)
from pacpath.maze.layout import GameMap

logger = logging.getLogger(__name__)


class TilePos(NamedTuple):
    """Grid coordinates: i is the column, j is the row."""

    i: int
    j: int


class Direction(Enum):
    """Direction of an edge on the tile grid."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    def reverse(self) -> Direction:
        """The opposite direction."""
        return _REVERSED[self]


_REVERSED = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class MazeVertex:
    """
    A path tile, with at most one outgoing edge per direction.

    Vertices compare by identity; each MazeGraph owns exactly one vertex per
    path tile.
    """

    def __init__(self, loc: TilePos) -> None:
        self._loc = loc
        self._edges: dict[Direction, MazeEdge] = {}

    @property
    def loc(self) -> TilePos:
        return self._loc

    def edge_in_direction(self, direction: Direction) -> MazeEdge | None:
        """
        Edge leaving this vertex in the given direction, or None.

        A tunnel edge points towards the border it crosses (an edge from a
        top tile to a bottom tile points UP).
        """
        return self._edges.get(direction)

    def outgoing_edges(self) -> list[MazeEdge]:
        return list(self._edges.values())

    def _add_outgoing_edge(self, edge: MazeEdge) -> None:
        if edge.src is not self:
            raise ValueError(f"Edge {edge!r} does not leave {self!r}")
        if edge.direction in self._edges:
            raise ValueError(f"{self!r} already has a {edge.direction.name} edge")
        self._edges[edge.direction] = edge

    def __repr__(self) -> str:
        return f"MazeVertex({self._loc.i}, {self._loc.j})"


@dataclass(frozen=True)
class MazeEdge:
    """
    Directed edge between adjacent path tiles.

    Attributes:
        src: Tile the edge leaves
        dst: Tile the edge enters
        direction: Grid direction the edge points in
        weight: Elevation-adjusted traversal cost
    """

    src: MazeVertex
    dst: MazeVertex
    direction: Direction
    weight: float

    def reverse(self) -> MazeEdge | None:
        """The edge from dst back to src. Requires the graph to be fully built."""
        return self.dst.edge_in_direction(self.direction.reverse())


def edge_weight(src_elevation: float, dst_elevation: float) -> float:
    """
    Weight of an edge climbing from src_elevation to dst_elevation.

    Uphill edges cost more than flat ones, downhill edges less; the climb is
    clamped so the weight stays within [0.25, 1.75] and is never negative.
    """
    climb = float(np.clip(dst_elevation - src_elevation, -ELEVATION_CLAMP, ELEVATION_CLAMP))
    return BASE_EDGE_WEIGHT + climb * ELEVATION_SLOPE


class MazeGraph:
    """
    Graph connecting the path tiles of a GameMap.

    Usage:
        maze = MazeGraph(GameMap.from_template(text))
        start = maze.closest_to(2, 2)
        for edge in start.outgoing_edges():
            ...
    """

    def __init__(self, game_map: GameMap) -> None:
        """
        Build the graph with a breadth-first sweep over each component of path tiles.

        Args:
            game_map: Tile types and elevations of the maze
        """
        self._width = game_map.width
        self._height = game_map.height
        self._vertices: dict[TilePos, MazeVertex] = {}

        elevations = game_map.elevations

        for i in range(self._width):
            for j in range(self._height):
                seed = TilePos(i, j)
                if not game_map.is_path(i, j) or seed in self._vertices:
                    continue

                self._vertices[seed] = MazeVertex(seed)
                queue = deque([seed])

                while queue:
                    loc = queue.popleft()
                    src = self._vertices[loc]

                    for direction in Direction:
                        di, dj = direction.value
                        neighbor_loc = TilePos((loc.i + di) % self._width, (loc.j + dj) % self._height)
                        if not game_map.is_path(*neighbor_loc):
                            continue

                        if neighbor_loc not in self._vertices:
                            self._vertices[neighbor_loc] = MazeVertex(neighbor_loc)
                            queue.append(neighbor_loc)

                        weight = edge_weight(
                            elevations[loc.i, loc.j], elevations[neighbor_loc.i, neighbor_loc.j]
                        )
                        src._add_outgoing_edge(
                            MazeEdge(src, self._vertices[neighbor_loc], direction, weight)
                        )

        logger.debug(
            f"Built maze graph with {len(self._vertices)} vertices "
            f"from a {self._width}x{self._height} tile grid"
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def vertices(self) -> list[MazeVertex]:
        return list(self._vertices.values())

    def vertex_at(self, i: int, j: int) -> MazeVertex | None:
        """Vertex for path tile (i, j), or None if that tile is not a path."""
        return self._vertices.get(TilePos(i, j))

    def closest_to(self, i: int, j: int) -> MazeVertex:
        """
        Return a vertex close to tile (i, j).

        Agents use this to turn an arbitrary target tile into a reachable one.
        Relies on the maze layout guarantee that tiles (3x+2, 3y+2) are path
        tiles; most of the time the result is a closest vertex if tunnels
        are ignored.
        """
        i = min(max(i, 0), self._width - 2)
        j = min(max(j, 0), self._height - 2)

        ip = max(i - 1, 0) // LATTICE_PITCH * LATTICE_PITCH + LATTICE_OFFSET
        jp = max(j - 1, 0) // LATTICE_PITCH * LATTICE_PITCH + LATTICE_OFFSET

        for loc in (TilePos(i, j), TilePos(i, jp), TilePos(ip, j), TilePos(ip, jp)):
            vertex = self._vertices.get(loc)
            if vertex is not None:
                return vertex

        # (ip, jp) lies inside the ghost box; the lattice tile below it is outside
        below = self._vertices.get(TilePos(ip, jp + LATTICE_PITCH))
        if below is None:
            raise ValueError(f"No path tile near ({i}, {j}); maze does not follow the lattice layout")
        return below

    def pac_mann_starting_edge(self) -> MazeEdge:
        """Edge PacMann is treated as having arrived by at the start of a game."""
        loc = TilePos(
            (self._width - 1) // 2,
            LATTICE_PITCH * ((LATTICE_PITCH * (self._height // LATTICE_PITCH) - 1) // 4) + LATTICE_OFFSET,
        )
        start = self._require_vertex(loc)
        arriving = start.edge_in_direction(Direction.LEFT) or start.edge_in_direction(Direction.UP)
        if arriving is None:
            raise ValueError(f"Starting tile {loc} has no LEFT or UP neighbour")
        return arriving.reverse()

    def ghost_starting_edge(self) -> MazeEdge:
        """First edge a ghost traverses when it leaves the ghost box."""
        loc = TilePos((self._width - 1) // 2, LATTICE_PITCH * ((self._height - 3) // 6) - 1)
        edge = self._require_vertex(loc).edge_in_direction(Direction.RIGHT)
        if edge is None:
            raise ValueError(f"Ghost starting tile {loc} has no RIGHT neighbour")
        return edge

    def _require_vertex(self, loc: TilePos) -> MazeVertex:
        vertex = self._vertices.get(loc)
        if vertex is None:
            raise ValueError(f"Tile {loc} is not a path tile")
        return vertex

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"MazeGraph({self._width}x{self._height}, vertices={len(self._vertices)})"
