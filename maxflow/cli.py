"""
    Batch driver: compute the max flow of one or more edge-list files and
    optionally write a CSV summary.

    maxflow file1.txt file2.txt ...   process specific files
    maxflow -d directory              process all .txt files in directory
    maxflow -a                        process ladder_*.txt and bridge_*.txt
"""

import argparse
import csv
import glob
import logging
import os
import sys
import time
from dataclasses import asdict, dataclass
from typing import List, Optional

from .algorithms import active_edges, compute_max_flow
from .config import Settings, configure_logging, load_settings
from .errors import MaxFlowError
from .parsing import load_network

logger = logging.getLogger(__name__)

DEFAULT_FILE = "network.txt"
CSV_FIELDS = {
    "file": "File",
    "nodes": "Nodes",
    "edges": "Edges",
    "max_flow": "Max Flow",
    "parse_ms": "Parse Time (ms)",
    "algorithm_ms": "Algorithm Time (ms)",
    "total_ms": "Total Time (ms)",
}


@dataclass
class FileReport:
    file: str
    nodes: int = 0
    edges: int = 0
    max_flow: int = 0
    parse_ms: int = 0
    algorithm_ms: int = 0
    total_ms: int = 0
    ok: bool = True


def _ms(start: float) -> int:
    return int(round((time.perf_counter() - start) * 1000))


def process_file(path: str, settings: Settings, verbose: bool = True,
                 source: int = 0, sink: Optional[int] = None) -> FileReport:
    report = FileReport(os.path.basename(path))
    try:
        if verbose:
            print("\n" + "-" * 40)
            print(f"Processing file: {path}")

        start = time.perf_counter()
        network = load_network(path, settings)
        report.parse_ms = _ms(start)

        t = network.n - 1 if sink is None else sink
        report.nodes = network.n
        report.edges = network.edge_count()

        if verbose:
            print(f"Network loaded with {report.nodes} nodes and {report.edges} edges")
            print(f"Parsing time: {report.parse_ms} ms")
            print(f"Calculating maximum flow from node {source} to node {t}")

        start = time.perf_counter()
        report.max_flow, steps = compute_max_flow(network, source, t, trace=verbose,
                                                  flow_limit=settings.flow_limit)
        report.algorithm_ms = _ms(start)
        report.total_ms = report.parse_ms + report.algorithm_ms

        if verbose:
            print("Ford-Fulkerson Algorithm Steps:")
            for step in steps:
                print(f"Path: {' → '.join(map(str, step.path))}, Flow added: {step.bottleneck}, "
                      f"Total flow: {step.flow_so_far}")
            print(f"\nMaximum Flow: {report.max_flow}")
            print(f"Algorithm execution time: {report.algorithm_ms} ms")
            print(f"Total time: {report.total_ms} ms")
            if network.n <= settings.flow_print_node_limit:
                print("\nFinal Flow Distribution:")
                for u, v, f, c in active_edges(network):
                    print(f"Edge ({u},{v}): Flow = {f} / Capacity = {c}")
    except OSError as e:
        logger.error("cannot read %s: %s", path, e)
        report = FileReport(report.file, ok=False)
    except MaxFlowError as e:
        logger.error("error processing %s: %s", path, e)
        report = FileReport(report.file, ok=False)
    return report


def collect_files(args) -> List[str]:
    if args.directory:
        return sorted(glob.glob(os.path.join(args.directory, "*.txt")))
    if args.all:
        files = glob.glob("ladder_*.txt") + glob.glob("bridge_*.txt")
        return sorted(files, key=lambda f: (os.path.getsize(f), f))
    return list(args.files)


def write_csv(reports: List[FileReport], csv_path: str) -> str:
    with open(csv_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(CSV_FIELDS.values()))
        writer.writeheader()
        for report in reports:
            row = asdict(report)
            writer.writerow({header: row[key] for key, header in CSV_FIELDS.items()})
    logger.info("wrote %d rows to %s", len(reports), csv_path)
    return csv_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maxflow", description="Edmonds-Karp maximum flow over edge-list files.")
    parser.add_argument("files", nargs="*", help="edge-list files to process")
    parser.add_argument("-d", "--directory", help="process all .txt files in this directory")
    parser.add_argument("-a", "--all", action="store_true",
                        help="process all benchmark files (ladder_*.txt and bridge_*.txt)")
    parser.add_argument("--csv", dest="csv_path", help="CSV results path")
    parser.add_argument("--source", type=int, default=0)
    parser.add_argument("--sink", type=int, default=None, help="defaults to the last node")
    parser.add_argument("--representation", choices=["auto", "dense", "sparse"])
    parser.add_argument("--config", help="YAML settings file")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-v", "--verbose", action="store_true", help="detailed output for every file")
    group.add_argument("-q", "--quiet", action="store_true", help="one summary line per file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    if args.representation:
        settings = settings.model_copy(update={"representation": args.representation})
    configure_logging(settings.log_level)

    if not (args.files or args.directory or args.all):
        parser.print_help()
        print(f"\nRunning with default file '{DEFAULT_FILE}'")
        report = process_file(DEFAULT_FILE, settings, True, args.source, args.sink)
        return 0 if report.ok else 1

    files = collect_files(args)
    if not files:
        print("No files to process. Please check your arguments.")
        return 2

    write_results = bool(args.directory or args.all or len(files) > 1 or args.csv_path)
    verbose = args.verbose or (not args.quiet and len(files) <= settings.verbose_file_limit)
    print(f"Processing {len(files)} files...")

    reports = []
    for path in files:
        report = process_file(path, settings, verbose, args.source, args.sink)
        if not verbose:
            print(f"{path}: {report.nodes} nodes, {report.edges} edges, "
                  f"Max Flow = {report.max_flow}, Time = {report.total_ms} ms")
        reports.append(report)

    if write_results:
        csv_path = write_csv(reports, args.csv_path or settings.csv_path)
        print(f"\nResults saved to {csv_path}")

    return 0 if all(r.ok for r in reports) else 1


if __name__ == "__main__":
    sys.exit(main())
