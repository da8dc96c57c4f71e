"""Shared fixtures for graph analysis tests."""
from __future__ import annotations

import pytest

from schedgraph.graph.adjacency import Graph

SEED = 42


@pytest.fixture
def empty_graph() -> Graph:
    return Graph(0)


@pytest.fixture
def three_cycle() -> Graph:
    """0 -> 1 -> 2 -> 0"""
    g = Graph(3)
    for u, v in [(0, 1), (1, 2), (2, 0)]:
        g.add_edge(u, v, 1)
    return g


@pytest.fixture
def scc_graph() -> Graph:
    """
    {0, 1, 2} cycle -> {3, 4} cycle -> {5}

    0 -> 1 -> 2 -> 0,  3 <-> 4,  2 -> 3 (2),  4 -> 5 (3)
    """
    g = Graph(6)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 0, 1)
    g.add_edge(3, 4, 1)
    g.add_edge(4, 3, 1)
    g.add_edge(2, 3, 2)
    g.add_edge(4, 5, 3)
    return g


@pytest.fixture
def weighted_dag() -> Graph:
    """
    0 -> 1 (5)   0 -> 2 (3)
    1 -> 3 (2)   2 -> 3 (1)   2 -> 4 (4)
    3 -> 5 (2)   4 -> 5 (3)
    """
    g = Graph(6)
    for u, v, w in [
        (0, 1, 5), (0, 2, 3), (1, 3, 2), (2, 3, 1),
        (2, 4, 4), (3, 5, 2), (4, 5, 3),
    ]:
        g.add_edge(u, v, w)
    return g


@pytest.fixture
def linear_graph() -> Graph:
    """0 -> 1 -> 2 -> 3, unit weights"""
    g = Graph(4)
    for i in range(3):
        g.add_edge(i, i + 1, 1)
    return g
