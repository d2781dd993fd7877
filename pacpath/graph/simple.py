"""
A small labelled graph that can be written down as text.

Text format, one edge per line (weight optional, default 1):

    A -> B 2      directed edge from A to B
    A -- C 6      undirected: edges A -> C and C -> A
    D             isolated vertex
    # comment

Usage:
    from pacpath.graph.simple import SimpleGraph

    g = SimpleGraph.from_text("A -> B 2\\nB -- C")
    g.get_vertex("A").outgoing_edges()
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class SimpleVertex:
    """
    A vertex identified by its label.

    Attributes:
        label: Name of the vertex, unique within its graph
    """

    label: str
    _edges: list[SimpleEdge] = field(default_factory=list, repr=False)

    def outgoing_edges(self) -> list[SimpleEdge]:
        """Edges leaving this vertex, in the order they were added."""
        return list(self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleVertex):
            return NotImplemented
        return self.label == other.label

    def __hash__(self) -> int:
        return hash(self.label)


@dataclass(frozen=True)
class SimpleEdge:
    """
    Directed weighted edge between two SimpleVertex objects.

    Attributes:
        src: Vertex the edge leaves
        dst: Vertex the edge enters
        weight: Non-negative traversal cost
    """

    src: SimpleVertex
    dst: SimpleVertex
    weight: float = 1.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.weight) or self.weight < 0:
            raise ValueError(f"Edge weight must be finite and non-negative, got {self.weight}")

    def __repr__(self) -> str:
        return f"SimpleEdge({self.src.label} -> {self.dst.label}, {self.weight:g})"


class SimpleGraph:
    """
    Directed weighted graph keyed by vertex label.

    Vertices are created on demand by add_edge(), so a graph can be built
    entirely from edges.
    """

    def __init__(self) -> None:
        self._vertices: dict[str, SimpleVertex] = {}

    @classmethod
    def from_text(cls, text: str) -> SimpleGraph:
        """
        Build a graph from its text description (see module docstring).

        Raises:
            ValueError: If a line is malformed or has a bad weight
        """
        graph = cls()
        for line_no, raw in enumerate(text.splitlines(), start=1):
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue

            tokens = line.split()
            if len(tokens) == 1:
                graph.add_vertex(tokens[0])
                continue
            if len(tokens) not in (3, 4) or tokens[1] not in ("->", "--"):
                raise ValueError(f"Line {line_no}: expected 'A -> B [weight]' or 'A -- B [weight]', got {raw!r}")

            start, arrow, end = tokens[:3]
            try:
                weight = float(tokens[3]) if len(tokens) == 4 else 1.0
            except ValueError:
                raise ValueError(f"Line {line_no}: bad weight {tokens[3]!r}") from None

            graph.add_edge(start, end, weight)
            if arrow == "--":
                graph.add_edge(end, start, weight)

        return graph

    def add_vertex(self, label: str) -> SimpleVertex:
        """Return the vertex with this label, creating it if needed."""
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = SimpleVertex(label)
            self._vertices[label] = vertex
        return vertex

    def add_edge(self, src_label: str, dst_label: str, weight: float = 1.0) -> SimpleEdge:
        """Add a directed edge between two labels and return it."""
        src = self.add_vertex(src_label)
        dst = self.add_vertex(dst_label)
        edge = SimpleEdge(src, dst, weight)
        src._edges.append(edge)
        return edge

    def get_vertex(self, label: str) -> SimpleVertex:
        """Get vertex by label. Raises KeyError if absent."""
        try:
            return self._vertices[label]
        except KeyError:
            raise KeyError(f"No vertex labelled {label!r}") from None

    def get_edge(self, src: SimpleVertex, dst: SimpleVertex) -> SimpleEdge | None:
        """First edge from src to dst, or None if they are not adjacent."""
        for edge in src.outgoing_edges():
            if edge.dst == dst:
                return edge
        return None

    def vertices(self) -> list[SimpleVertex]:
        return list(self._vertices.values())

    def edges(self) -> Iterator[SimpleEdge]:
        for vertex in self._vertices.values():
            yield from vertex.outgoing_edges()

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __repr__(self) -> str:
        return f"SimpleGraph(vertices={len(self._vertices)})"
