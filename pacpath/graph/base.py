"""
Capability protocols for searchable graphs.

Any vertex type that can list its outgoing edges, paired with an edge type
exposing its endpoints and a non-negative weight, can be searched. No
concrete graph class is required.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

E_co = TypeVar("E_co", covariant=True)
V_co = TypeVar("V_co", covariant=True)


class Vertex(Protocol[E_co]):
    """A hashable graph node that can enumerate the edges leaving it."""

    def outgoing_edges(self) -> Iterable[E_co]:
        """Return the edges whose source is this vertex (possibly none)."""
        ...


class Edge(Protocol[V_co]):
    """
    A directed, weighted connection between two vertices.

    Attributes:
        src: Vertex the edge leaves from
        dst: Vertex the edge arrives at
        weight: Traversal cost, never negative
    """

    @property
    def src(self) -> V_co: ...

    @property
    def dst(self) -> V_co: ...

    @property
    def weight(self) -> float: ...
