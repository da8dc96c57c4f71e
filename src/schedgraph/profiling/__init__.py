"""Analysis pipeline and report formatting."""

from schedgraph.profiling.harness import AnalysisReport, run_analysis
from schedgraph.profiling.report import (
    format_distances,
    format_metrics,
    format_metrics_table,
    format_report,
)

__all__ = [
    "AnalysisReport",
    "format_distances",
    "format_metrics",
    "format_metrics_table",
    "format_report",
    "run_analysis",
]
