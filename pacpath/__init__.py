"""
PacPath: non-backtracking shortest paths for maze-chasing agents.

A generic Dijkstra engine over any graph exposing outgoing edges, backed
by an indexed binary min-heap, plus the maze graph and agents that
consume it.
"""

__version__ = "0.1.0"
