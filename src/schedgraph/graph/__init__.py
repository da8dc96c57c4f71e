"""Graph algorithms: SCCs, condensation, topological order, DAG paths."""

from schedgraph.graph.adjacency import (
    Edge,
    Graph,
    GraphError,
    VertexIndexError,
    WeightedEdge,
)
from schedgraph.graph.dag_paths import (
    CriticalPath,
    DAGPathSolver,
    Objective,
    PathResult,
    critical_path,
    critical_path_from,
    longest_paths,
    shortest_paths,
)
from schedgraph.graph.metrics import Metrics, MetricsSnapshot
from schedgraph.graph.scc import (
    Condensation,
    KosarajuSCC,
    SCCResult,
    build_condensation,
    find_sccs,
)
from schedgraph.graph.topological import (
    CycleDetectedError,
    TopologicalSorter,
    dfs_sort,
    is_topological_order,
    kahn_sort,
)

__all__ = [
    "Condensation",
    "CriticalPath",
    "CycleDetectedError",
    "DAGPathSolver",
    "Edge",
    "Graph",
    "GraphError",
    "KosarajuSCC",
    "Metrics",
    "MetricsSnapshot",
    "Objective",
    "PathResult",
    "SCCResult",
    "TopologicalSorter",
    "VertexIndexError",
    "WeightedEdge",
    "build_condensation",
    "critical_path",
    "critical_path_from",
    "dfs_sort",
    "find_sccs",
    "is_topological_order",
    "kahn_sort",
    "longest_paths",
    "shortest_paths",
]
