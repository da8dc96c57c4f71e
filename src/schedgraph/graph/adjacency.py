"""Directed weighted graph over dense integer vertices.

Vertices are the integers 0..n-1, fixed at construction.  Each vertex
owns an ordered list of outgoing Edge values; insertion order is
preserved because every traversal in this package (finish order in
Kosaraju, FIFO order in Kahn, first-seen condensation weights) depends
on it.

The graph is append-only: edges can be added but never removed, and
the vertex count never changes.  transpose() builds a brand-new graph
instead of a reversed view, so the two never share storage.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


class GraphError(Exception):
    """Base class for graph analysis failures."""


class VertexIndexError(GraphError, IndexError):
    """Raised when a vertex index falls outside [0, n)."""

    def __init__(self, vertex: int, n: int) -> None:
        self.vertex = vertex
        self.n = n
        super().__init__(f"Vertex {vertex!r} out of range for graph with {n} vertices")


@dataclass(frozen=True, slots=True)
class Edge:
    """Outgoing edge stored in a vertex's adjacency list."""
    target: int
    weight: int


@dataclass(frozen=True, slots=True)
class WeightedEdge:
    """Fully qualified edge u -> v with weight w."""
    u: int
    v: int
    w: int


class Graph:
    """Directed graph backed by per-vertex adjacency lists.

    >>> g = Graph(3)
    >>> g.add_edge(0, 1, 4)
    >>> g.adjacent(0)
    (Edge(target=1, weight=4),)
    """

    __slots__ = ("_n", "_adj", "_edge_count")

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Vertex count must be an int, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}")
        self._n = n
        self._adj: list[list[Edge]] = [[] for _ in range(n)]
        self._edge_count = 0

    # ---- mutation --------------------------------------------------------

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Append the edge u -> v with weight w to u's adjacency list.

        Self-loops and parallel edges are accepted as-is.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        if isinstance(w, bool) or not isinstance(w, int):
            raise TypeError(f"Edge weight must be an int, got {type(w).__name__}")
        self._adj[u].append(Edge(v, w))
        self._edge_count += 1

    # ---- queries ---------------------------------------------------------

    def adjacent(self, u: int) -> tuple[Edge, ...]:
        """Outgoing edges of *u* in insertion order."""
        self._check_vertex(u)
        return tuple(self._adj[u])

    @property
    def n(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def out_degree(self, u: int) -> int:
        self._check_vertex(u)
        return len(self._adj[u])

    def in_degrees(self) -> list[int]:
        """In-degree of every vertex, computed with one scan over all edges."""
        deg = [0] * self._n
        for edges in self._adj:
            for e in edges:
                deg[e.target] += 1
        return deg

    def all_edges(self) -> list[WeightedEdge]:
        """Every edge as a (u, v, w) triple, by source vertex then insertion."""
        return [
            WeightedEdge(u, e.target, e.weight)
            for u, edges in enumerate(self._adj)
            for e in edges
        ]

    def transpose(self) -> Graph:
        """Return a new graph with every edge reversed, weights unchanged."""
        rev = Graph(self._n)
        for u, edges in enumerate(self._adj):
            for e in edges:
                rev._adj[e.target].append(Edge(u, e.weight))
        rev._edge_count = self._edge_count
        return rev

    def vertices(self) -> Iterator[int]:
        return iter(range(self._n))

    # ---- internals -------------------------------------------------------

    def _check_vertex(self, u: int) -> None:
        if isinstance(u, bool) or not isinstance(u, int) or not 0 <= u < self._n:
            raise VertexIndexError(u, self._n)

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, edges={self._edge_count})"
