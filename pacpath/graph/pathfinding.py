"""
Non-backtracking shortest paths via Dijkstra's algorithm.

An agent that has just arrived at `src` along `previous_edge` may not turn
straight back along it. The search forbids that reversal on the first hop
only; later hops cannot backtrack because every path it returns follows a
tree of strictly improving backpointers, so no vertex repeats.

Usage:
    from pacpath.graph.pathfinding import shortest_non_backtracking_path

    path = shortest_non_backtracking_path(here, target, arrived_by)
    if path:
        next_move = path[0]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from pacpath.graph.base import Edge, Vertex
from pacpath.graph.pqueue import MinPQueue

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Vertex)
E = TypeVar("E", bound=Edge)


@dataclass(frozen=True)
class PathEnd(Generic[E]):
    """
    Summary of the best known path to one vertex.

    Attributes:
        distance: Total weight of the path from the search source
        last_edge: Final edge of the path, or None for the source itself
    """

    distance: float
    last_edge: E | None


def shortest_non_backtracking_path(src: V, dst: V, previous_edge: E | None = None) -> list[E] | None:
    """
    Find the shortest non-backtracking path from src to dst.

    Args:
        src: Vertex to start from
        dst: Vertex to reach
        previous_edge: Edge the caller arrived at src by, if any. The first
            edge of the path will not lead back to its source.

    Returns:
        Edges ordered from src to dst (empty when src == dst), or None if
        dst cannot be reached without backtracking

    Raises:
        ValueError: If previous_edge does not end at src
    """
    paths = path_info(src, previous_edge)
    if dst not in paths:
        logger.debug(f"No non-backtracking path from {src!r} to {dst!r}")
        return None
    return path_to(paths, src, dst)


def path_info(src: V, previous_edge: E | None = None) -> dict[V, PathEnd[E]]:
    """
    Run Dijkstra from src and summarise the shortest path to every reachable vertex.

    Vertices enter the result when discovered and are refined until settled,
    so on return each entry holds the final distance and backpointer.
    Unreachable vertices are absent.

    Args:
        src: Search source; maps to PathEnd(0.0, None)
        previous_edge: Edge the caller arrived at src by, if any

    Returns:
        Dict from each reachable vertex to its PathEnd

    Raises:
        ValueError: If previous_edge does not end at src
    """
    if previous_edge is not None and previous_edge.dst != src:
        raise ValueError(
            f"previous_edge must end at the search source {src!r}, "
            f"but it ends at {previous_edge.dst!r}"
        )

    paths: dict[V, PathEnd[E]] = {src: PathEnd(0.0, None)}
    frontier: MinPQueue[V] = MinPQueue()
    frontier.add_or_update(src, 0.0)

    # Vertex we must not step back to on the first hop
    forbidden = previous_edge.src if previous_edge is not None else None

    while not frontier.is_empty():
        current = frontier.remove()
        current_distance = paths[current].distance

        for edge in current.outgoing_edges():
            neighbor = edge.dst

            if forbidden is not None and current == src and neighbor == forbidden:
                continue

            candidate = current_distance + edge.weight
            known = paths.get(neighbor)
            if known is not None and known.distance <= candidate:
                continue

            paths[neighbor] = PathEnd(candidate, edge)
            frontier.add_or_update(neighbor, candidate)

    logger.debug(f"Settled {len(paths)} vertices from {src!r}")
    return paths


def path_to(paths: Mapping[V, PathEnd[E]], src: V, dst: V) -> list[E] | None:
    """
    Rebuild the edge list from src to dst by following backpointers.

    Args:
        paths: Result of path_info(src, ...)
        src: Source the paths were computed from
        dst: Vertex to walk back from

    Returns:
        Edges ordered from src to dst, or None if the backpointer chain
        breaks before reaching src
    """
    path: list[E] = []
    current = dst

    while current != src:
        info = paths.get(current)
        if info is None or info.last_edge is None:
            return None
        path.append(info.last_edge)
        current = info.last_edge.src

    path.reverse()
    return path
