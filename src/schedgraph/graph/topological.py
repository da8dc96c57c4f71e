"""Topological ordering: Kahn's algorithm and DFS post-order reversal.

Kahn's algorithm (BFS with in-degree tracking):
  1.  Compute in-degree for every vertex with one scan over all edges.
  2.  Seed a FIFO queue with every in-degree-zero vertex, ascending.
  3.  Pop a vertex, append it to the result, decrement the in-degree of
      each edge target.  A target whose in-degree drops to 0 enters the
      queue right away.
  4.  If the result is shorter than n, some vertices never reached
      in-degree 0, which only happens when they sit on or behind a cycle.

The DFS variant marks vertices "on stack" while their adjacency is
being explored.  An edge into an on-stack vertex is a back edge, i.e. a
cycle, and the sort aborts on the spot.  Otherwise each vertex is
appended when it finishes and the post-order is reversed at the end.

Both produce a valid order for any DAG, but not necessarily the same
one: Kahn breaks ties by FIFO order seeded by index, while the DFS
order follows the shape of the traversal.  Neither ever returns a
partial order; a cycle always raises CycleDetectedError.
"""
from __future__ import annotations

import logging
from collections import deque

from schedgraph.graph.adjacency import Edge, Graph, GraphError
from schedgraph.graph.metrics import Metrics

log = logging.getLogger(__name__)


class CycleDetectedError(GraphError):
    """Raised when a topological sort encounters a cycle.

    *vertices* holds the unprocessed vertices for Kahn's algorithm and
    the closed cycle path [v0, v1, ..., vk, v0] for the DFS variant.
    """

    def __init__(self, vertices: list[int], method: str) -> None:
        self.vertices = vertices
        self.method = method
        if method == "dfs":
            detail = "cycle " + " -> ".join(str(v) for v in vertices)
        else:
            detail = f"{len(vertices)} vertex(es) could not be ordered"
        super().__init__(f"Graph contains a cycle ({method}): {detail}")


def kahn_sort(graph: Graph, metrics: Metrics | None = None) -> list[int]:
    """Return the vertices of *graph* in Kahn topological order.

    Raises CycleDetectedError if the graph has a cycle.
    """
    m = metrics if metrics is not None else Metrics()
    m.reset()
    m.start()

    n = graph.n
    in_deg = graph.in_degrees()

    q: deque[int] = deque()
    for v in range(n):
        if in_deg[v] == 0:
            q.append(v)
            m.increment_queue_pushes()

    order: list[int] = []
    while q:
        u = q.popleft()
        m.increment_queue_pops()
        order.append(u)
        for e in graph.adjacent(u):
            m.increment_edges_traversed()
            in_deg[e.target] -= 1
            if in_deg[e.target] == 0:
                q.append(e.target)
                m.increment_queue_pushes()

    m.stop()
    if len(order) != n:
        emitted = set(order)
        remaining = [v for v in range(n) if v not in emitted]
        log.debug("kahn: cycle, %d of %d vertices unordered", len(remaining), n)
        raise CycleDetectedError(remaining, method="kahn")

    log.debug("kahn: ordered %d vertices in %.3f ms", n, m.time_millis)
    return order


def dfs_sort(graph: Graph, metrics: Metrics | None = None) -> list[int]:
    """Return the vertices of *graph* in reversed DFS post-order.

    Raises CycleDetectedError, carrying the cycle path, as soon as a
    back edge is found.
    """
    m = metrics if metrics is not None else Metrics()
    m.reset()
    m.start()

    n = graph.n
    adj: list[tuple[Edge, ...]] = [graph.adjacent(u) for u in range(n)]
    visited = [False] * n
    on_stack = [False] * n
    cursor = [0] * n
    post: list[int] = []

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = on_stack[root] = True
        m.increment_dfs_visits()
        stack = [root]
        while stack:
            u = stack[-1]
            i = cursor[u]
            if i < len(adj[u]):
                cursor[u] = i + 1
                m.increment_edges_traversed()
                v = adj[u][i].target
                if on_stack[v]:
                    # back edge: the stack from v up to u is the cycle
                    cycle = stack[stack.index(v):] + [v]
                    m.stop()
                    log.debug("dfs: back edge %d -> %d", u, v)
                    raise CycleDetectedError(cycle, method="dfs")
                if not visited[v]:
                    visited[v] = on_stack[v] = True
                    m.increment_dfs_visits()
                    stack.append(v)
            else:
                stack.pop()
                on_stack[u] = False
                post.append(u)

    post.reverse()
    m.stop()
    log.debug("dfs: ordered %d vertices in %.3f ms", n, m.time_millis)
    return post


def is_topological_order(graph: Graph, order: list[int]) -> bool:
    """True if *order* is a permutation of the vertices respecting every edge."""
    if len(order) != graph.n or sorted(order) != list(range(graph.n)):
        return False
    pos = [0] * graph.n
    for i, v in enumerate(order):
        pos[v] = i
    return all(pos[e.u] < pos[e.v] for e in graph.all_edges())


class TopologicalSorter:
    """Per-graph sorter holding the metrics and order of its last run.

    Usage:
        topo = TopologicalSorter(dag)
        order = topo.kahn()       # or topo.dfs()
        print(topo.metrics)
    """

    __slots__ = ("_graph", "_metrics", "_order")

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._metrics = Metrics()
        self._order: list[int] | None = None

    def kahn(self) -> list[int]:
        self._order = None
        self._order = kahn_sort(self._graph, self._metrics)
        return list(self._order)

    def dfs(self) -> list[int]:
        self._order = None
        self._order = dfs_sort(self._graph, self._metrics)
        return list(self._order)

    @property
    def order(self) -> list[int] | None:
        """Order from the last successful run, or None."""
        return list(self._order) if self._order is not None else None

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def graph(self) -> Graph:
        return self._graph
