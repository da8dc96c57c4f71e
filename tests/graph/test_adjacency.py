"""Tests for the adjacency-list Graph."""
from __future__ import annotations

import pytest

from schedgraph.graph.adjacency import (
    Edge,
    Graph,
    GraphError,
    VertexIndexError,
    WeightedEdge,
)


class TestGraphBasics:
    def test_empty_graph(self, empty_graph: Graph) -> None:
        assert empty_graph.n == 0
        assert len(empty_graph) == 0
        assert empty_graph.edge_count == 0
        assert empty_graph.all_edges() == []

    def test_vertices_start_without_edges(self) -> None:
        g = Graph(3)
        assert g.n == 3
        assert all(g.adjacent(u) == () for u in range(3))

    def test_add_edge_preserves_insertion_order(self) -> None:
        g = Graph(4)
        g.add_edge(0, 3, 7)
        g.add_edge(0, 1, -2)
        g.add_edge(0, 2, 0)
        assert g.adjacent(0) == (Edge(3, 7), Edge(1, -2), Edge(2, 0))
        assert g.edge_count == 3
        assert g.out_degree(0) == 3

    def test_self_loops_and_parallel_edges_allowed(self) -> None:
        g = Graph(2)
        g.add_edge(0, 0, 1)
        g.add_edge(0, 1, 2)
        g.add_edge(0, 1, 5)
        assert g.edge_count == 3
        assert g.adjacent(0) == (Edge(0, 1), Edge(1, 2), Edge(1, 5))

    def test_adjacent_returns_copy(self, linear_graph: Graph) -> None:
        edges = linear_graph.adjacent(0)
        linear_graph.add_edge(0, 2, 9)
        assert edges == (Edge(1, 1),)
        assert len(linear_graph.adjacent(0)) == 2

    def test_all_edges_order(self, weighted_dag: Graph) -> None:
        edges = weighted_dag.all_edges()
        assert edges[0] == WeightedEdge(0, 1, 5)
        assert edges[1] == WeightedEdge(0, 2, 3)
        assert edges[-1] == WeightedEdge(4, 5, 3)
        assert len(edges) == 7

    def test_in_degrees(self, weighted_dag: Graph) -> None:
        assert weighted_dag.in_degrees() == [0, 1, 1, 2, 1, 2]

    def test_repr(self, linear_graph: Graph) -> None:
        assert repr(linear_graph) == "Graph(n=4, edges=3)"


class TestTranspose:
    def test_edges_reversed_weights_kept(self, weighted_dag: Graph) -> None:
        t = weighted_dag.transpose()
        assert t.n == weighted_dag.n
        assert t.edge_count == weighted_dag.edge_count
        forward = {(e.u, e.v, e.w) for e in weighted_dag.all_edges()}
        backward = {(e.v, e.u, e.w) for e in t.all_edges()}
        assert forward == backward

    def test_transpose_does_not_alias(self, linear_graph: Graph) -> None:
        t = linear_graph.transpose()
        linear_graph.add_edge(3, 0, 1)
        assert t.edge_count == 3
        assert t.adjacent(0) == ()
        t.add_edge(0, 3, 4)
        assert linear_graph.adjacent(0) == (Edge(1, 1),)

    def test_double_transpose_round_trip(self, scc_graph: Graph) -> None:
        tt = scc_graph.transpose().transpose()
        assert sorted(
            (e.u, e.v, e.w) for e in tt.all_edges()
        ) == sorted((e.u, e.v, e.w) for e in scc_graph.all_edges())


class TestBoundsChecks:
    def test_negative_vertex_count(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Graph(-1)

    def test_non_int_vertex_count(self) -> None:
        with pytest.raises(TypeError):
            Graph(2.5)  # type: ignore[arg-type]

    @pytest.mark.parametrize("u,v", [(-1, 0), (0, 3), (3, 0), (0, -1)])
    def test_add_edge_out_of_range(self, u: int, v: int) -> None:
        g = Graph(3)
        with pytest.raises(VertexIndexError, match="out of range"):
            g.add_edge(u, v, 1)
        assert g.edge_count == 0

    def test_adjacent_out_of_range(self, linear_graph: Graph) -> None:
        with pytest.raises(VertexIndexError):
            linear_graph.adjacent(4)

    def test_vertex_error_is_index_error(self) -> None:
        g = Graph(1)
        with pytest.raises(IndexError):
            g.adjacent(1)
        with pytest.raises(GraphError):
            g.adjacent(-1)

    def test_vertex_error_carries_details(self) -> None:
        g = Graph(2)
        with pytest.raises(VertexIndexError) as exc_info:
            g.add_edge(0, 5, 1)
        assert exc_info.value.vertex == 5
        assert exc_info.value.n == 2

    def test_non_int_weight_rejected(self) -> None:
        g = Graph(2)
        with pytest.raises(TypeError, match="weight"):
            g.add_edge(0, 1, 1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError, match="weight"):
            g.add_edge(0, 1, True)

    def test_bool_vertex_rejected(self) -> None:
        g = Graph(2)
        with pytest.raises(VertexIndexError):
            g.add_edge(True, 0, 1)
