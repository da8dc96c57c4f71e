"""Operation counters and wall-clock timing for graph algorithms.

Every algorithm instance owns exactly one Metrics object.  A run calls
reset() and start() on entry, bumps counters from inside its traversal
loops, and calls stop() before returning.  Callers read the numbers
afterwards, usually through an immutable MetricsSnapshot so later runs
on the same instance can't change a value they already hold.

Counting granularity:
  dfs_visits       -- one per vertex entered by a depth-first traversal
  edges_traversed  -- one per adjacency entry examined
  queue_pushes     -- one per vertex enqueued (Kahn)
  queue_pops       -- one per vertex dequeued (Kahn)
  relaxations      -- one per relaxation attempt, improving or not
"""
from __future__ import annotations

import time
from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class MetricsSnapshot:
    """Point-in-time copy of a Metrics object."""
    dfs_visits: int = 0
    edges_traversed: int = 0
    queue_pushes: int = 0
    queue_pops: int = 0
    relaxations: int = 0
    time_nanos: int = 0

    @property
    def time_millis(self) -> float:
        return self.time_nanos / 1_000_000.0

    def as_dict(self) -> dict[str, int | float]:
        d: dict[str, int | float] = asdict(self)
        d["time_millis"] = self.time_millis
        return d


class Metrics:
    """Mutable counter/timer bundle for a single algorithm instance."""

    __slots__ = (
        "_dfs_visits",
        "_edges_traversed",
        "_queue_pushes",
        "_queue_pops",
        "_relaxations",
        "_start_ns",
        "_end_ns",
    )

    def __init__(self) -> None:
        self.reset()

    # ---- timing ----------------------------------------------------------

    def start(self) -> None:
        self._start_ns = time.perf_counter_ns()

    def stop(self) -> None:
        self._end_ns = time.perf_counter_ns()

    @property
    def time_nanos(self) -> int:
        # a run that never stopped (or never started) reports zero
        if self._end_ns < self._start_ns:
            return 0
        return self._end_ns - self._start_ns

    @property
    def time_millis(self) -> float:
        return self.time_nanos / 1_000_000.0

    # ---- counters --------------------------------------------------------

    def increment_dfs_visits(self) -> None:
        self._dfs_visits += 1

    def increment_edges_traversed(self) -> None:
        self._edges_traversed += 1

    def increment_queue_pushes(self) -> None:
        self._queue_pushes += 1

    def increment_queue_pops(self) -> None:
        self._queue_pops += 1

    def increment_relaxations(self) -> None:
        self._relaxations += 1

    @property
    def dfs_visits(self) -> int:
        return self._dfs_visits

    @property
    def edges_traversed(self) -> int:
        return self._edges_traversed

    @property
    def queue_pushes(self) -> int:
        return self._queue_pushes

    @property
    def queue_pops(self) -> int:
        return self._queue_pops

    @property
    def relaxations(self) -> int:
        return self._relaxations

    # ---- lifecycle -------------------------------------------------------

    def reset(self) -> None:
        """Zero every counter and both timestamps."""
        self._dfs_visits = 0
        self._edges_traversed = 0
        self._queue_pushes = 0
        self._queue_pops = 0
        self._relaxations = 0
        self._start_ns = 0
        self._end_ns = 0

    def snapshot(self) -> MetricsSnapshot:
        return MetricsSnapshot(
            dfs_visits=self._dfs_visits,
            edges_traversed=self._edges_traversed,
            queue_pushes=self._queue_pushes,
            queue_pops=self._queue_pops,
            relaxations=self._relaxations,
            time_nanos=self.time_nanos,
        )

    def __str__(self) -> str:
        return (
            f"time={self.time_millis:.4f} ms, "
            f"dfs_visits={self._dfs_visits}, "
            f"edges_traversed={self._edges_traversed}, "
            f"queue_pops={self._queue_pops}, "
            f"queue_pushes={self._queue_pushes}, "
            f"relaxations={self._relaxations}"
        )

    def __repr__(self) -> str:
        return f"Metrics({self.snapshot()!r})"
