"""Single-source shortest and longest paths on a weighted DAG.

Algorithm (same for both objectives):
  1.  Topologically sort the DAG (always Kahn; a cycle raises
      CycleDetectedError before any distance is computed).
  2.  Every distance starts unreachable except the source, which is 0.
  3.  Walk vertices in topological order.  For each vertex u that has a
      distance, try every outgoing edge u -> v: the candidate is
      dist[u] + w.  If v has no distance yet, or the candidate is
      strictly better (smaller for SHORTEST, larger for LONGEST), take
      it and record u as v's predecessor.

Processing in topological order means dist[u] is final before any of
u's edges are relaxed, so one pass is enough and the whole thing is
O(V + E).  Negative weights are fine for both objectives.

Unreachable vertices have distance None rather than a large magic
number, so there is no sentinel arithmetic to overflow and no way to
mistake "unreachable" for a real distance.

The critical path is the longest path from the source to whichever
vertex ends up with the greatest distance (lowest index on ties).
"""
from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from enum import Enum

from schedgraph.graph.adjacency import Graph, VertexIndexError, WeightedEdge
from schedgraph.graph.metrics import Metrics, MetricsSnapshot
from schedgraph.graph.topological import kahn_sort

log = logging.getLogger(__name__)


class Objective(Enum):
    SHORTEST = "shortest"
    LONGEST = "longest"


@dataclass(frozen=True, slots=True)
class PathResult:
    """Distances and predecessor links from one solver run."""
    source: int
    objective: Objective
    distances: tuple[int | None, ...]
    predecessors: tuple[int | None, ...]
    metrics: MetricsSnapshot = field(default_factory=MetricsSnapshot)

    def _check(self, target: int) -> None:
        if isinstance(target, bool) or not 0 <= target < len(self.distances):
            raise VertexIndexError(target, len(self.distances))

    def is_reachable(self, target: int) -> bool:
        self._check(target)
        return self.distances[target] is not None

    def distance_to(self, target: int) -> int | None:
        self._check(target)
        return self.distances[target]

    def path_to(self, target: int) -> list[int]:
        """Vertices from the source to *target*, following predecessors.

        Returns an empty list when *target* is unreachable, so a
        non-empty result always starts at the source.
        """
        self._check(target)
        if self.distances[target] is None:
            return []
        path = [target]
        cur = target
        while cur != self.source:
            prev = self.predecessors[cur]
            assert prev is not None, f"reachable vertex {cur} has no predecessor"
            path.append(prev)
            cur = prev
        path.reverse()
        return path


@dataclass(frozen=True, slots=True)
class CriticalPath:
    """Longest path from the source and its total weight."""
    path: tuple[int, ...]
    length: int
    bottleneck: WeightedEdge | None = None   # heaviest edge on the path

    @property
    def endpoint(self) -> int:
        return self.path[-1]


def _solve(
    graph: Graph, source: int, objective: Objective, metrics: Metrics | None
) -> PathResult:
    n = graph.n
    if isinstance(source, bool) or not isinstance(source, int) or not 0 <= source < n:
        raise VertexIndexError(source, n)

    m = metrics if metrics is not None else Metrics()
    m.reset()
    m.start()

    order = kahn_sort(graph)
    better = operator.lt if objective is Objective.SHORTEST else operator.gt

    dist: list[int | None] = [None] * n
    pred: list[int | None] = [None] * n
    dist[source] = 0

    for u in order:
        du = dist[u]
        if du is None:
            continue
        for e in graph.adjacent(u):
            m.increment_relaxations()
            cand = du + e.weight
            cur = dist[e.target]
            if cur is None or better(cand, cur):
                dist[e.target] = cand
                pred[e.target] = u

    m.stop()
    log.debug(
        "%s paths from %d: %d/%d reachable, %d relaxations in %.3f ms",
        objective.value, source, sum(d is not None for d in dist), n,
        m.relaxations, m.time_millis,
    )
    return PathResult(
        source=source,
        objective=objective,
        distances=tuple(dist),
        predecessors=tuple(pred),
        metrics=m.snapshot(),
    )


def shortest_paths(
    graph: Graph, source: int, metrics: Metrics | None = None
) -> PathResult:
    """Minimum-weight distances from *source* to every vertex."""
    return _solve(graph, source, Objective.SHORTEST, metrics)


def longest_paths(
    graph: Graph, source: int, metrics: Metrics | None = None
) -> PathResult:
    """Maximum-weight distances from *source* to every vertex."""
    return _solve(graph, source, Objective.LONGEST, metrics)


def critical_path_from(result: PathResult) -> CriticalPath:
    """Extract the critical path from a LONGEST PathResult."""
    if result.objective is not Objective.LONGEST:
        raise ValueError("Critical path needs a longest-path result")

    best_vertex = result.source
    best_dist: int | None = None
    for v, d in enumerate(result.distances):
        if d is not None and (best_dist is None or d > best_dist):
            best_dist = d
            best_vertex = v
    assert best_dist is not None  # the source itself is always at 0

    path = result.path_to(best_vertex)

    # consecutive vertices on a predecessor chain differ by exactly the
    # weight of the edge that set the later one's distance
    bottleneck: WeightedEdge | None = None
    for a, b in zip(path, path[1:]):
        w = result.distances[b] - result.distances[a]  # type: ignore[operator]
        if bottleneck is None or w > bottleneck.w:
            bottleneck = WeightedEdge(a, b, w)

    return CriticalPath(path=tuple(path), length=best_dist, bottleneck=bottleneck)


def critical_path(
    graph: Graph, source: int, metrics: Metrics | None = None
) -> CriticalPath:
    """Longest path from *source* in *graph*.

    Raises CycleDetectedError (via kahn_sort) if the graph has a cycle.
    """
    return critical_path_from(longest_paths(graph, source, metrics))


class DAGPathSolver:
    """Per-graph solver that keeps the result of its last run.

    Usage:
        sp = DAGPathSolver(dag)
        dist = sp.shortest_paths(0)
        path = sp.reconstruct_path(0, 5)
        cp = sp.find_critical_path(0)

    Every call overwrites the previous result, so reconstruct_path()
    always answers for whichever of shortest_paths() / longest_paths()
    ran last.  Use one instance per thread, or the module-level
    functions, which return independent results.
    """

    __slots__ = ("_graph", "_metrics", "_result")

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._metrics = Metrics()
        self._result: PathResult | None = None

    def shortest_paths(self, source: int) -> list[int | None]:
        self._result = shortest_paths(self._graph, source, self._metrics)
        return list(self._result.distances)

    def longest_paths(self, source: int) -> list[int | None]:
        self._result = longest_paths(self._graph, source, self._metrics)
        return list(self._result.distances)

    def find_critical_path(self, source: int) -> CriticalPath:
        self.longest_paths(source)
        assert self._result is not None
        return critical_path_from(self._result)

    def reconstruct_path(self, source: int, target: int) -> list[int]:
        """Path from *source* to *target* using the last computed result.

        Returns [] if *target* is unreachable.
        """
        if self._result is None:
            raise RuntimeError(
                "Call shortest_paths() or longest_paths() before reconstruct_path()"
            )
        if self._result.source != source:
            raise RuntimeError(
                f"Last result was computed from source {self._result.source}, "
                f"not {source}"
            )
        return self._result.path_to(target)

    def reconstruct_shortest_path(self, source: int, target: int) -> list[int]:
        """Recompute shortest paths from *source*, then reconstruct."""
        self.shortest_paths(source)
        return self.reconstruct_path(source, target)

    @property
    def distances(self) -> list[int | None] | None:
        return list(self._result.distances) if self._result is not None else None

    @property
    def last_result(self) -> PathResult | None:
        return self._result

    @property
    def metrics(self) -> Metrics:
        return self._metrics

    @property
    def graph(self) -> Graph:
        return self._graph
