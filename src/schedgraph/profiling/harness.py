"""End-to-end analysis pipeline with per-stage metrics.

Runs the full chain on one graph:

  1. Kosaraju SCC detection
  2. Condensation of each component to a single vertex
  3. Kahn topological order of the condensation, expanded back into an
     order of the original vertices
  4. Shortest distances from the source's component
  5. Critical (longest) path from the source's component
  6. One sample shortest path to the first reachable component among
     the first three

Every stage keeps its own MetricsSnapshot so the report can show them
side by side.  If profile=True, the whole run is wrapped in cProfile
and the top functions by cumulative time are included in the result.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass

from schedgraph.graph.adjacency import Graph, VertexIndexError
from schedgraph.graph.dag_paths import (
    CriticalPath,
    PathResult,
    critical_path_from,
    longest_paths,
    shortest_paths,
)
from schedgraph.graph.metrics import Metrics, MetricsSnapshot
from schedgraph.graph.scc import Condensation, SCCResult, build_condensation, find_sccs
from schedgraph.graph.topological import kahn_sort

log = logging.getLogger(__name__)

# how many leading components are considered for the sample path
SAMPLE_PATH_CANDIDATES = 3


@dataclass(slots=True)
class AnalysisReport:
    """Everything one pipeline run produced."""
    source: int
    source_component: int
    scc: SCCResult
    condensation: Condensation
    component_order: list[int]
    task_order: list[int]
    topo_metrics: MetricsSnapshot
    shortest: PathResult
    longest: PathResult
    critical: CriticalPath
    sample_path: list[int] | None
    total_time_ms: float
    cprofile_stats: str | None = None

    def stage_metrics(self) -> dict[str, MetricsSnapshot]:
        return {
            "scc": self.scc.metrics,
            "topological": self.topo_metrics,
            "shortest": self.shortest.metrics,
            "critical": self.longest.metrics,
        }


def run_analysis(graph: Graph, source: int, profile: bool = False) -> AnalysisReport:
    """Run every stage on *graph* starting from vertex *source*."""
    if isinstance(source, bool) or not isinstance(source, int) or not 0 <= source < graph.n:
        raise VertexIndexError(source, graph.n)

    profiler = cProfile.Profile() if profile else None
    t_start = time.perf_counter()
    if profiler is not None:
        profiler.enable()
    try:
        scc = find_sccs(graph)
        log.info("scc: %d components %s", scc.count, scc.sizes())

        condensation = build_condensation(graph, scc)
        dag = condensation.graph
        log.info("condensation: %d vertices, %d edges", dag.n, dag.edge_count)

        topo = Metrics()
        component_order = kahn_sort(dag, topo)
        task_order = condensation.expand(component_order)
        log.info("topological order of components: %s", component_order)

        src_comp = scc.component_id(source)
        shortest = shortest_paths(dag, src_comp)
        longest = longest_paths(dag, src_comp)
        critical = critical_path_from(longest)
        log.info(
            "critical path from component %d: %s (length %d)",
            src_comp, list(critical.path), critical.length,
        )

        sample: list[int] | None = None
        for cid in range(min(dag.n, SAMPLE_PATH_CANDIDATES)):
            if cid != src_comp and shortest.is_reachable(cid):
                sample = shortest.path_to(cid)
                break
    finally:
        if profiler is not None:
            profiler.disable()

    total_ms = (time.perf_counter() - t_start) * 1000.0

    stats_text: str | None = None
    if profiler is not None:
        buf = io.StringIO()
        pstats.Stats(profiler, stream=buf).sort_stats("cumulative").print_stats(20)
        stats_text = buf.getvalue()

    return AnalysisReport(
        source=source,
        source_component=src_comp,
        scc=scc,
        condensation=condensation,
        component_order=component_order,
        task_order=task_order,
        topo_metrics=topo.snapshot(),
        shortest=shortest,
        longest=longest,
        critical=critical,
        sample_path=sample,
        total_time_ms=total_ms,
        cprofile_stats=stats_text,
    )
