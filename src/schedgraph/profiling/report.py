"""Report generation for analysis results.

Formats AnalysisReport data into human-readable text for terminal
output.
"""
from __future__ import annotations

from schedgraph.graph.metrics import MetricsSnapshot
from schedgraph.profiling.harness import AnalysisReport


def format_metrics(m: MetricsSnapshot) -> str:
    return (
        f"time={m.time_millis:.4f} ms, dfs_visits={m.dfs_visits}, "
        f"edges_traversed={m.edges_traversed}, queue_pops={m.queue_pops}, "
        f"queue_pushes={m.queue_pushes}, relaxations={m.relaxations}"
    )


def format_distances(distances: tuple[int | None, ...] | list[int | None]) -> list[str]:
    return [
        f"  Component {i}: {'unreachable' if d is None else d}"
        for i, d in enumerate(distances)
    ]


def format_report(report: AnalysisReport, label: str = "Graph analysis") -> str:
    """Format an AnalysisReport as a readable multi-section report."""
    scc = report.scc
    lines = [
        f"=== {label} ===",
        "",
        "--- Strongly Connected Components ---",
        f"Found {scc.count} strongly connected component(s):",
    ]
    for i, comp in enumerate(scc.components):
        lines.append(f"  Component {i}: {list(comp)} (size: {len(comp)})")
    lines.append(f"Metrics: {format_metrics(scc.metrics)}")

    dag = report.condensation.graph
    lines += [
        "",
        "--- Condensation Graph ---",
        f"{dag.n} vertices (components), {dag.edge_count} edges",
        "",
        "--- Topological Sort ---",
        f"Order of components: {report.component_order}",
        f"Derived order of original tasks: {report.task_order}",
        f"Metrics: {format_metrics(report.topo_metrics)}",
        "",
        "--- Shortest Paths ---",
        f"From component {report.source_component} "
        f"(source vertex {report.source}):",
    ]
    lines += format_distances(report.shortest.distances)
    lines.append(f"Metrics: {format_metrics(report.shortest.metrics)}")

    crit = report.critical
    lines += [
        "",
        "--- Critical Path ---",
        f"Path: {list(crit.path)}",
        f"Length: {crit.length}",
    ]
    if crit.bottleneck is not None:
        b = crit.bottleneck
        lines.append(f"Heaviest edge: {b.u} -> {b.v} (weight {b.w})")
    lines.append(f"Metrics: {format_metrics(report.longest.metrics)}")

    if report.sample_path is not None:
        lines += [
            "",
            "--- Sample Path Reconstruction ---",
            f"Path from component {report.source_component} to "
            f"{report.sample_path[-1]}: {report.sample_path}",
        ]

    lines += ["", f"Total time: {report.total_time_ms:.3f} ms"]
    return "\n".join(lines)


def format_metrics_table(report: AnalysisReport) -> str:
    """Per-stage counters side by side."""
    header = (
        f"{'Stage':<14} {'Time (ms)':>10} {'DFS':>6} {'Edges':>7} "
        f"{'Push':>6} {'Pop':>6} {'Relax':>7}"
    )
    lines = [header, "-" * len(header)]
    for stage, m in report.stage_metrics().items():
        lines.append(
            f"{stage:<14} {m.time_millis:>10.4f} {m.dfs_visits:>6} "
            f"{m.edges_traversed:>7} {m.queue_pushes:>6} {m.queue_pops:>6} "
            f"{m.relaxations:>7}"
        )
    return "\n".join(lines)
