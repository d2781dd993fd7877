"""
Graph algorithms module.

Provides the shortest-path engine shared by every agent:
- Vertex / Edge: capability protocols a searchable graph must satisfy
- MinPQueue: indexed binary min-heap with mutable priorities
- path_info / shortest_non_backtracking_path / path_to: Dijkstra search
  that never reverses the edge an agent just arrived on
- SimpleGraph: small text-described graph for tests and ad hoc queries
"""

from pacpath.graph.base import Edge, Vertex
from pacpath.graph.pathfinding import (
    PathEnd,
    path_info,
    path_to,
    shortest_non_backtracking_path,
)
from pacpath.graph.pqueue import MinPQueue
from pacpath.graph.simple import SimpleEdge, SimpleGraph, SimpleVertex

__all__ = [
    "Edge",
    "Vertex",
    "MinPQueue",
    "PathEnd",
    "path_info",
    "path_to",
    "shortest_non_backtracking_path",
    "SimpleEdge",
    "SimpleGraph",
    "SimpleVertex",
]
