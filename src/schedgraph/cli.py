"""schedgraph CLI entry point.

Usage: schedgraph [command]
"""
import argparse
import logging
import sys

log = logging.getLogger(__name__)


def _add_analyze_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "analyze",
        help="Run SCC, topological sort and DAG path analysis on a graph file.",
    )
    p.add_argument("file", help="Path to a JSON graph document.")
    p.add_argument(
        "--source", type=int, default=None,
        help="Source vertex (default: the document's 'source' field)",
    )
    p.add_argument(
        "--metrics-table", action="store_true",
        help="Also print a per-stage metrics table.",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _add_generate_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "generate",
        help="Write the preset sample datasets as JSON documents.",
    )
    p.add_argument("outdir", help="Directory to write the datasets into.")
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible datasets (default: 42)",
    )
    p.add_argument(
        "--only", action="append", metavar="NAME", default=None,
        help="Generate only the named preset (repeatable).",
    )


def _run_analyze(args: argparse.Namespace) -> None:
    from schedgraph.datasets.loader import load_document
    from schedgraph.profiling.harness import run_analysis
    from schedgraph.profiling.report import format_metrics_table, format_report

    doc = load_document(args.file)
    source = doc.source if args.source is None else args.source
    log.info("loaded %s: n=%d, %d edges", args.file, doc.n, len(doc.edges))

    report = run_analysis(doc.to_graph(), source, profile=args.cprofile)
    print(format_report(report, label=f"Analysis of {args.file}"))
    if args.metrics_table:
        print()
        print(format_metrics_table(report))
    if report.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(report.cprofile_stats)


def _run_generate(args: argparse.Namespace) -> None:
    from pathlib import Path

    from schedgraph.config import DATASET_PRESETS, GeneratorConfig, preset_by_name
    from schedgraph.datasets.generator import GraphGenerator
    from schedgraph.datasets.loader import dump_document

    presets = DATASET_PRESETS
    if args.only:
        presets = tuple(preset_by_name(name) for name in args.only)

    gen = GraphGenerator(GeneratorConfig(seed=args.seed))
    outdir = Path(args.outdir)
    for preset in presets:
        path = outdir / preset.filename
        dump_document(gen.from_preset(preset), path)
        print(f"Generated {path}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="schedgraph",
        description="Directed-graph scheduling analysis: SCCs, topological order, DAG paths.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every stage at DEBUG level.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_analyze_parser(subparsers)
    _add_generate_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from schedgraph.datasets.loader import DocumentError
    from schedgraph.graph.adjacency import GraphError

    try:
        if args.command == "analyze":
            _run_analyze(args)
        elif args.command == "generate":
            _run_generate(args)
    except (GraphError, DocumentError, KeyError, OSError) as exc:
        log.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
