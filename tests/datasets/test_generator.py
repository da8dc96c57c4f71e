"""Tests for seeded synthetic graph generation."""
from __future__ import annotations

import pytest

from schedgraph.config import DATASET_PRESETS, GeneratorConfig, GraphKind, preset_by_name
from schedgraph.datasets.generator import GraphGenerator
from schedgraph.graph.scc import find_sccs
from schedgraph.graph.topological import CycleDetectedError, is_topological_order, kahn_sort


class TestDagGenerator:
    def test_forward_edges_only(self) -> None:
        doc = GraphGenerator().dag(30, 0.3)
        assert doc.edges
        assert all(e.u < e.v for e in doc.edges)
        g = doc.to_graph()
        assert is_topological_order(g, kahn_sort(g))

    def test_same_seed_same_graph(self) -> None:
        a = GraphGenerator(GeneratorConfig(seed=7)).dag(20, 0.25)
        b = GraphGenerator(GeneratorConfig(seed=7)).dag(20, 0.25)
        c = GraphGenerator(GeneratorConfig(seed=8)).dag(20, 0.25)
        assert a.edges == b.edges
        assert a.edges != c.edges

    def test_weights_in_configured_range(self) -> None:
        gen = GraphGenerator(GeneratorConfig(min_weight=-3, max_weight=3))
        doc = gen.dag(25, 0.5)
        assert all(-3 <= e.w <= 3 for e in doc.edges)

    def test_density_extremes(self) -> None:
        gen = GraphGenerator()
        assert gen.dag(6, 0.0).edges == []
        assert len(gen.dag(6, 1.0).edges) == 15

    def test_invalid_arguments(self) -> None:
        gen = GraphGenerator()
        with pytest.raises(ValueError, match="at least one vertex"):
            gen.dag(0, 0.5)
        with pytest.raises(ValueError, match="source=5"):
            gen.dag(5, 0.5, source=5)


class TestCyclicGenerator:
    def test_planted_cycle_is_one_component(self) -> None:
        doc = GraphGenerator().cyclic(8, 1, 0.0, source=2)
        scc = find_sccs(doc.to_graph())
        # one ring over vertices 0..3
        assert len({scc.component_id(v) for v in range(4)}) == 1
        assert doc.source == 2

    def test_topological_sort_fails(self) -> None:
        doc = GraphGenerator().cyclic(18, 3, 0.15)
        with pytest.raises(CycleDetectedError):
            kahn_sort(doc.to_graph())

    def test_no_duplicate_pairs(self) -> None:
        doc = GraphGenerator().cyclic(40, 5, 0.1)
        pairs = [(e.u, e.v) for e in doc.edges]
        assert len(pairs) == len(set(pairs))
        assert all(u != v for u, v in pairs)

    def test_two_vertex_graph(self) -> None:
        doc = GraphGenerator().cyclic(2, 1, 0.0)
        assert sorted((e.u, e.v) for e in doc.edges) == [(0, 1), (1, 0)]

    def test_invalid_arguments(self) -> None:
        gen = GraphGenerator()
        with pytest.raises(ValueError):
            gen.cyclic(1, 1, 0.1)
        with pytest.raises(ValueError, match="num_cycles"):
            gen.cyclic(5, 0, 0.1)


class TestMultiSccGenerator:
    @pytest.mark.parametrize("n,k", [(10, 2), (20, 4), (50, 6)])
    def test_component_count(self, n: int, k: int) -> None:
        doc = GraphGenerator().multi_scc(n, k, 0.5)
        scc = find_sccs(doc.to_graph())
        size = n // k
        leftovers = n - k * size
        assert scc.count == k + leftovers
        assert sorted(scc.sizes(), reverse=True)[:k] == [size] * k

    def test_inter_edges_go_forward(self) -> None:
        doc = GraphGenerator().multi_scc(20, 4, 1.0)
        for e in doc.edges:
            if e.u // 5 != e.v // 5:
                assert e.u // 5 < e.v // 5

    def test_invalid_arguments(self) -> None:
        with pytest.raises(ValueError, match="num_sccs"):
            GraphGenerator().multi_scc(5, 6, 0.1)


class TestPresets:
    def test_all_presets_generate(self) -> None:
        gen = GraphGenerator()
        for preset in DATASET_PRESETS:
            doc = gen.from_preset(preset)
            assert doc.n == preset.n
            assert doc.source == preset.source
            g = doc.to_graph()
            if preset.kind is GraphKind.DAG:
                kahn_sort(g)
            else:
                assert find_sccs(g).count < preset.n

    def test_preset_lookup(self) -> None:
        assert preset_by_name("medium2").groups == 3
        assert preset_by_name("large1").filename == "large1.json"
        with pytest.raises(KeyError, match="nope"):
            preset_by_name("nope")

    def test_config_validation(self) -> None:
        with pytest.raises(ValueError, match="exceeds"):
            GeneratorConfig(min_weight=5, max_weight=1)
