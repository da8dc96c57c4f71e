"""Tests for the end-to-end analysis pipeline."""
from __future__ import annotations

import pytest

from schedgraph.datasets.generator import GraphGenerator
from schedgraph.graph.adjacency import Graph, VertexIndexError
from schedgraph.graph.topological import is_topological_order
from schedgraph.profiling.harness import run_analysis


class TestRunAnalysis:
    def test_fixture_pipeline(self, scc_graph: Graph) -> None:
        report = run_analysis(scc_graph, 0)
        assert report.scc.count == 3
        assert report.source_component == 0
        assert report.component_order == [0, 1, 2]
        assert report.task_order == [0, 2, 1, 3, 4, 5]
        assert report.shortest.distances == (0, 2, 5)
        assert report.longest.distances == (0, 2, 5)
        assert report.critical.path == (0, 1, 2)
        assert report.critical.length == 5
        assert report.sample_path == [0, 1]
        assert report.total_time_ms > 0
        assert report.cprofile_stats is None

    def test_source_in_sink_component(self, scc_graph: Graph) -> None:
        report = run_analysis(scc_graph, 5)
        assert report.source_component == 2
        assert report.shortest.distances == (None, None, 0)
        assert report.critical.path == (2,)
        assert report.critical.length == 0
        assert report.sample_path is None

    def test_stage_metrics(self, scc_graph: Graph) -> None:
        report = run_analysis(scc_graph, 0)
        stages = report.stage_metrics()
        assert list(stages) == ["scc", "topological", "shortest", "critical"]
        assert stages["scc"].dfs_visits == 12
        assert stages["topological"].queue_pops == 3
        assert stages["shortest"].relaxations == 2
        assert stages["critical"].relaxations == 2

    def test_dag_input_keeps_vertices(self, weighted_dag: Graph) -> None:
        report = run_analysis(weighted_dag, 0)
        assert report.scc.count == 6
        assert is_topological_order(weighted_dag, report.task_order)

    def test_generated_cyclic_graph(self) -> None:
        doc = GraphGenerator().cyclic(40, 5, 0.1, source=10)
        report = run_analysis(doc.to_graph(), doc.source)
        dag = report.condensation.graph
        assert dag.n == report.scc.count
        assert is_topological_order(dag, report.component_order)
        assert sorted(report.task_order) == list(range(40))
        assert report.critical.path[0] == report.source_component

    def test_with_profiling(self, weighted_dag: Graph) -> None:
        report = run_analysis(weighted_dag, 0, profile=True)
        assert report.cprofile_stats is not None
        assert "function calls" in report.cprofile_stats

    def test_invalid_source(self, weighted_dag: Graph) -> None:
        with pytest.raises(VertexIndexError):
            run_analysis(weighted_dag, 6)
