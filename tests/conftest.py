"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest

from pacpath.graph import SimpleGraph
from pacpath.maze import GameMap, MazeGraph

# A small, strongly connected graph: three vertices, four directed edges
GRAPH_TRIANGLE = """
A -> B 2
A -- C 6
B -> C 3
"""

# Classic weighted example; shortest A -> G is A C E F G
GRAPH_LECTURE = """
A -> B 9
A -> C 14
A -> D 15
B -> E 23
C -> E 17
C -> D 5
C -> F 30
D -> F 20
D -> G 37
E -> F 3
E -> G 20
F -> G 16
"""

# Path tiles on columns and rows 2, 5 and 8, as the maze generator lays them out
LATTICE_MAZE = """
wwwwwwwwwww
wwwwwwwwwww
wwpppppppww
wwpwwpwwpww
wwpwwpwwpww
wwpppppppww
wwpwwpwwpww
wwpwwpwwpww
wwpppppppww
wwwwwwwwwww
wwwwwwwwwww
"""


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def triangle_graph() -> SimpleGraph:
    """Return the three-vertex strongly connected graph."""
    return SimpleGraph.from_text(GRAPH_TRIANGLE)


@pytest.fixture
def lecture_graph() -> SimpleGraph:
    """Return the seven-vertex weighted example graph."""
    return SimpleGraph.from_text(GRAPH_LECTURE)


@pytest.fixture
def make_map() -> Callable[[str], GameMap]:
    """
    Return a factory building a GameMap from a w/p/g template.

    Elevations form a gradient from the top-left corner with a horizontal
    slope of 2 and a vertical slope of 1.
    """

    def factory(template: str) -> GameMap:
        flat = GameMap.from_template(template)
        elevations = np.fromfunction(lambda i, j: 2.0 * i + j, flat.types.shape)
        return GameMap(types=flat.types, elevations=elevations)

    return factory


@pytest.fixture
def lattice_maze() -> MazeGraph:
    """Return the flat 11x11 lattice maze graph."""
    return MazeGraph(GameMap.from_template(LATTICE_MAZE))
