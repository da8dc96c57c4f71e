"""Graph documents on disk and seeded synthetic graphs."""

from schedgraph.datasets.generator import GraphGenerator
from schedgraph.datasets.loader import (
    DocumentError,
    GraphDocument,
    dump_document,
    dumps_document,
    load_document,
    load_graph,
    loads_document,
    parse_document,
)

__all__ = [
    "DocumentError",
    "GraphDocument",
    "GraphGenerator",
    "dump_document",
    "dumps_document",
    "load_document",
    "load_graph",
    "loads_document",
    "parse_document",
]
