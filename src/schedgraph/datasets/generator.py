"""Seeded synthetic graphs for tests, benchmarks and sample datasets.

Three shapes:
  - dag:        forward edges only (u < v), each pair with probability
                *density*.  Always acyclic.
  - cyclic:     *num_cycles* planted cycles over consecutive vertex
                runs, plus random extra edges in any direction.
  - multi_scc:  n split into *num_sccs* equal blocks, each closed into a
                ring (one component per block), plus forward edges
                from lower to higher blocks so the component DAG stays
                acyclic.  Leftover vertices past the last full block
                are singletons.

All three draw from one random.Random, so a generator with a given seed
yields the same sequence of graphs every run.  No (u, v) pair is ever
emitted twice.
"""
from __future__ import annotations

import random

from schedgraph.config import DEFAULT_GENERATOR, DatasetPreset, GeneratorConfig, GraphKind
from schedgraph.datasets.loader import GraphDocument
from schedgraph.graph.adjacency import WeightedEdge


class GraphGenerator:
    """Generate random graph documents with planted structure."""

    __slots__ = ("_rng", "_min_w", "_max_w")

    def __init__(self, config: GeneratorConfig = DEFAULT_GENERATOR) -> None:
        self._rng = random.Random(config.seed)
        self._min_w = config.min_weight
        self._max_w = config.max_weight

    def _weight(self) -> int:
        return self._rng.randint(self._min_w, self._max_w)

    @staticmethod
    def _check(n: int, source: int) -> None:
        if n < 1:
            raise ValueError(f"Need at least one vertex, got n={n}")
        if not 0 <= source < n:
            raise ValueError(f"source={source} out of range for n={n}")

    def dag(self, n: int, density: float, source: int = 0) -> GraphDocument:
        self._check(n, source)
        edges: list[WeightedEdge] = []
        for u in range(n):
            for v in range(u + 1, n):
                if self._rng.random() < density:
                    edges.append(WeightedEdge(u, v, self._weight()))
        return GraphDocument(n=n, source=source, edges=edges)

    def cyclic(
        self,
        n: int,
        num_cycles: int,
        additional_density: float,
        source: int = 0,
    ) -> GraphDocument:
        self._check(n, source)
        if n < 2:
            raise ValueError("A cyclic graph needs at least 2 vertices")
        if num_cycles < 1:
            raise ValueError(f"num_cycles must be positive, got {num_cycles}")

        edges: list[WeightedEdge] = []
        seen: set[tuple[int, int]] = set()

        def _add(u: int, v: int) -> None:
            if (u, v) not in seen:
                seen.add((u, v))
                edges.append(WeightedEdge(u, v, self._weight()))

        cycle_size = min(n, max(2, n // (num_cycles + 1)))
        span = n - cycle_size
        for c in range(num_cycles):
            start = (c * cycle_size) % span if span > 0 else 0
            for i in range(cycle_size - 1):
                _add(start + i, start + i + 1)
            _add(start + cycle_size - 1, start)

        for u in range(n):
            for v in range(n):
                if u != v and self._rng.random() < additional_density:
                    _add(u, v)

        return GraphDocument(n=n, source=source, edges=edges)

    def multi_scc(
        self,
        n: int,
        num_sccs: int,
        inter_density: float,
        source: int = 0,
    ) -> GraphDocument:
        self._check(n, source)
        if not 1 <= num_sccs <= n:
            raise ValueError(f"num_sccs must be in [1, {n}], got {num_sccs}")

        edges: list[WeightedEdge] = []
        seen: set[tuple[int, int]] = set()
        size = n // num_sccs

        for block in range(num_sccs):
            start = block * size
            end = start + size
            for u in range(start, end - 1):
                seen.add((u, u + 1))
                edges.append(WeightedEdge(u, u + 1, self._weight()))
            if size > 1:
                seen.add((end - 1, start))
                edges.append(WeightedEdge(end - 1, start, self._weight()))

        for b1 in range(num_sccs):
            for b2 in range(b1 + 1, num_sccs):
                if self._rng.random() < inter_density:
                    u = b1 * size + self._rng.randrange(size)
                    v = b2 * size + self._rng.randrange(size)
                    if (u, v) not in seen:
                        seen.add((u, v))
                        edges.append(WeightedEdge(u, v, self._weight()))

        return GraphDocument(n=n, source=source, edges=edges)

    def from_preset(self, preset: DatasetPreset) -> GraphDocument:
        if preset.kind is GraphKind.DAG:
            return self.dag(preset.n, preset.density, preset.source)
        if preset.kind is GraphKind.CYCLIC:
            return self.cyclic(preset.n, preset.groups, preset.density, preset.source)
        return self.multi_scc(preset.n, preset.groups, preset.density, preset.source)
