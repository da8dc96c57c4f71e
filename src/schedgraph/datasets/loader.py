"""JSON graph documents.

A document describes one directed graph plus the source vertex used
for path analysis:

    {
      "directed": true,
      "n": 6,
      "edges": [{"u": 0, "v": 1, "w": 5}, ...],
      "source": 0,
      "weight_model": "edge"
    }

Only directed graphs with per-edge weights are supported.  Every field
is validated on load, so a GraphDocument that made it past
parse_document() always converts to a Graph without errors.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from schedgraph.graph.adjacency import Graph, WeightedEdge


class DocumentError(ValueError):
    """Raised when a graph document is malformed."""


@dataclass(slots=True)
class GraphDocument:
    n: int
    source: int
    edges: list[WeightedEdge] = field(default_factory=list)
    directed: bool = True
    weight_model: str = "edge"

    def to_graph(self) -> Graph:
        g = Graph(self.n)
        for e in self.edges:
            g.add_edge(e.u, e.v, e.w)
        return g

    @classmethod
    def from_graph(cls, graph: Graph, source: int) -> GraphDocument:
        return cls(n=graph.n, source=source, edges=graph.all_edges())

    def to_dict(self) -> dict[str, Any]:
        return {
            "directed": self.directed,
            "n": self.n,
            "edges": [{"u": e.u, "v": e.v, "w": e.w} for e in self.edges],
            "source": self.source,
            "weight_model": self.weight_model,
        }


def _require_int(obj: dict[str, Any], key: str, where: str) -> int:
    if key not in obj:
        raise DocumentError(f"{where}: missing required key {key!r}")
    val = obj[key]
    if isinstance(val, bool) or not isinstance(val, int):
        raise DocumentError(
            f"{where}: {key!r} must be an integer, got {type(val).__name__}"
        )
    return val


def parse_document(data: Any) -> GraphDocument:
    """Validate decoded JSON and build a GraphDocument from it."""
    if not isinstance(data, dict):
        raise DocumentError(f"document must be a JSON object, got {type(data).__name__}")

    if data.get("directed", True) is not True:
        raise DocumentError("document: only directed graphs are supported")
    weight_model = data.get("weight_model", "edge")
    if weight_model != "edge":
        raise DocumentError(f"document: unsupported weight_model {weight_model!r}")

    n = _require_int(data, "n", "document")
    if n < 0:
        raise DocumentError(f"document: 'n' must be non-negative, got {n}")

    raw_edges = data.get("edges", [])
    if not isinstance(raw_edges, list):
        raise DocumentError("document: 'edges' must be a list")

    edges: list[WeightedEdge] = []
    for i, raw in enumerate(raw_edges):
        where = f"edges[{i}]"
        if not isinstance(raw, dict):
            raise DocumentError(f"{where}: edge must be an object")
        u = _require_int(raw, "u", where)
        v = _require_int(raw, "v", where)
        w = _require_int(raw, "w", where)
        for name, vertex in (("u", u), ("v", v)):
            if not 0 <= vertex < n:
                raise DocumentError(
                    f"{where}: {name}={vertex} out of range for n={n}"
                )
        edges.append(WeightedEdge(u, v, w))

    source = _require_int(data, "source", "document")
    if not 0 <= source < n:
        raise DocumentError(f"document: source={source} out of range for n={n}")

    return GraphDocument(n=n, source=source, edges=edges)


def loads_document(text: str) -> GraphDocument:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"invalid JSON: {exc}") from exc
    return parse_document(data)


def load_document(path: str | Path) -> GraphDocument:
    """Read and validate the document at *path*.

    OSError from opening the file propagates unchanged.
    """
    with open(path, encoding="utf-8") as fh:
        text = fh.read()
    return loads_document(text)


def load_graph(path: str | Path) -> tuple[Graph, int]:
    """Shortcut returning (graph, source) for the document at *path*."""
    doc = load_document(path)
    return doc.to_graph(), doc.source


def dumps_document(doc: GraphDocument, indent: int | None = 2) -> str:
    return json.dumps(doc.to_dict(), indent=indent)


def dump_document(doc: GraphDocument, path: str | Path) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dumps_document(doc) + "\n", encoding="utf-8")
