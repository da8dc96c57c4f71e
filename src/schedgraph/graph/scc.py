"""Strongly connected components via Kosaraju's algorithm.

Two depth-first passes plus a merge step:

  1.  Walk vertices 0..n-1 in index order.  From every unvisited vertex
      run a DFS over the original graph and record each vertex when its
      whole adjacency list has been explored (post-order).  This is the
      finish order.
  2.  Build the transpose once.
  3.  Walk the finish order backwards.  From every unvisited vertex run
      a DFS over the transpose; everything it reaches is one component.
      Components get sequential ids in the order they are found.

Because step 3 always starts from the vertex that finished last, the
first component found is a source of the condensation DAG, and in
general component ids already form a topological order: no edge of the
condensation goes from a higher id back to a lower one.

Both passes are iterative.  The explicit stack holds vertex ids; the
position inside each vertex's adjacency list lives in a cursor array
indexed by vertex, so the traversal depth is limited by memory rather
than the interpreter's recursion limit.  The visit order is exactly the
one a recursive DFS would produce.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from schedgraph.graph.adjacency import Edge, Graph, VertexIndexError
from schedgraph.graph.metrics import Metrics, MetricsSnapshot

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SCCResult:
    """Component assignment produced by one Kosaraju run."""
    components: tuple[tuple[int, ...], ...]
    component_of: tuple[int, ...]
    metrics: MetricsSnapshot = field(default_factory=MetricsSnapshot)

    @property
    def count(self) -> int:
        return len(self.components)

    def component_id(self, vertex: int) -> int:
        if not 0 <= vertex < len(self.component_of):
            raise VertexIndexError(vertex, len(self.component_of))
        return self.component_of[vertex]

    def sizes(self) -> list[int]:
        return [len(c) for c in self.components]


@dataclass(frozen=True, slots=True)
class Condensation:
    """DAG obtained by contracting every component to a single vertex.

    Vertex i of *graph* stands for components[i].  Between two distinct
    components there is at most one edge; its weight is the weight of
    the first original edge (in all_edges() order) joining them.
    """
    graph: Graph
    component_of: tuple[int, ...]
    components: tuple[tuple[int, ...], ...]

    def expand(self, component_order: list[int]) -> list[int]:
        """Flatten an ordering of components back into original vertices."""
        out: list[int] = []
        for cid in component_order:
            out.extend(self.components[cid])
        return out


def _finish_order(graph: Graph, metrics: Metrics) -> list[int]:
    n = graph.n
    adj: list[tuple[Edge, ...]] = [graph.adjacent(u) for u in range(n)]
    visited = [False] * n
    cursor = [0] * n
    order: list[int] = []

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        metrics.increment_dfs_visits()
        stack = [root]
        while stack:
            u = stack[-1]
            i = cursor[u]
            if i < len(adj[u]):
                cursor[u] = i + 1
                metrics.increment_edges_traversed()
                v = adj[u][i].target
                if not visited[v]:
                    visited[v] = True
                    metrics.increment_dfs_visits()
                    stack.append(v)
            else:
                stack.pop()
                order.append(u)

    return order


def _collect_components(
    transposed: Graph, finish_order: list[int], metrics: Metrics
) -> tuple[list[list[int]], list[int]]:
    n = transposed.n
    adj: list[tuple[Edge, ...]] = [transposed.adjacent(u) for u in range(n)]
    comp_of = [-1] * n
    cursor = [0] * n
    components: list[list[int]] = []

    for root in reversed(finish_order):
        if comp_of[root] != -1:
            continue
        cid = len(components)
        members = [root]
        comp_of[root] = cid
        metrics.increment_dfs_visits()
        stack = [root]
        while stack:
            u = stack[-1]
            i = cursor[u]
            if i < len(adj[u]):
                cursor[u] = i + 1
                metrics.increment_edges_traversed()
                v = adj[u][i].target
                if comp_of[v] == -1:
                    comp_of[v] = cid
                    metrics.increment_dfs_visits()
                    members.append(v)
                    stack.append(v)
            else:
                stack.pop()
        components.append(members)

    return components, comp_of


def find_sccs(graph: Graph, metrics: Metrics | None = None) -> SCCResult:
    """Run Kosaraju on *graph* and return its strongly connected components.

    *metrics* is reset and filled in if given; otherwise a private one
    is used.  Either way the returned result carries a snapshot.
    """
    m = metrics if metrics is not None else Metrics()
    m.reset()
    m.start()

    order = _finish_order(graph, m)
    transposed = graph.transpose()
    components, comp_of = _collect_components(transposed, order, m)

    m.stop()
    log.debug(
        "kosaraju: %d vertices -> %d components in %.3f ms",
        graph.n, len(components), m.time_millis,
    )
    return SCCResult(
        components=tuple(tuple(c) for c in components),
        component_of=tuple(comp_of),
        metrics=m.snapshot(),
    )


def build_condensation(graph: Graph, scc: SCCResult | None = None) -> Condensation:
    """Contract every component of *graph* to one vertex.

    Pass a previously computed *scc* to skip re-running Kosaraju; it
    must have been computed on this graph.
    """
    if scc is None:
        scc = find_sccs(graph)
    if len(scc.component_of) != graph.n:
        raise ValueError(
            f"Component assignment covers {len(scc.component_of)} vertices, "
            f"graph has {graph.n}"
        )

    comp = scc.component_of
    dag = Graph(scc.count)
    seen: set[tuple[int, int]] = set()
    for e in graph.all_edges():
        cu, cv = comp[e.u], comp[e.v]
        if cu == cv or (cu, cv) in seen:
            continue
        seen.add((cu, cv))
        dag.add_edge(cu, cv, e.w)

    log.debug(
        "condensation: %d components, %d edges (from %d original edges)",
        dag.n, dag.edge_count, graph.edge_count,
    )
    return Condensation(
        graph=dag,
        component_of=scc.component_of,
        components=scc.components,
    )


class KosarajuSCC:
    """Per-graph SCC analyser that caches its last result.

    Usage:
        scc = KosarajuSCC(graph)
        components = scc.find_sccs()
        cid = scc.component_id(0)
        condensation = scc.build_condensation()
        print(scc.metrics)

    component_id(), component_count() and build_condensation() run the
    algorithm lazily if it hasn't run yet.  Appending edges to the graph
    afterwards invalidates the cache.
    """

    __slots__ = ("_graph", "_metrics", "_result", "_edge_count_seen")

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._metrics = Metrics()
        self._result: SCCResult | None = None
        self._edge_count_seen = -1

    def find_sccs(self) -> list[list[int]]:
        """Recompute the components and return them as fresh lists."""
        self._result = find_sccs(self._graph, self._metrics)
        self._edge_count_seen = self._graph.edge_count
        return [list(c) for c in self._result.components]

    @property
    def result(self) -> SCCResult:
        if self._result is None or self._edge_count_seen != self._graph.edge_count:
            self.find_sccs()
        assert self._result is not None
        return self._result

    def component_id(self, vertex: int) -> int:
        return self.result.component_id(vertex)

    def component_count(self) -> int:
        return self.result.count

    def build_condensation(self) -> Condensation:
        return build_condensation(self._graph, self.result)

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def graph(self) -> Graph:
        return self._graph
