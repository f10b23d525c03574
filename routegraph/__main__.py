"""Command line pipeline for route network analysis.

Example usage::

    python -m routegraph airports.csv
    python -m routegraph airports.csv --export degree_distribution.csv --top 20
"""
from __future__ import annotations

import argparse
import logging
import sys

from routegraph.config import AnalysisConfig
from routegraph.core.graph import build_graph
from routegraph.formats.export_degree_distribution import export_degree_distribution
from routegraph.formats.read_route import read_route_csv
from routegraph.operations.report import format_report, summarize_network

logger = logging.getLogger("routegraph")


def run(sFilename_in: str, sFilename_out: str, config: AnalysisConfig) -> None:
    """Read, analyze, export and print; I/O errors propagate."""
    aRoute = read_route_csv(sFilename_in)
    print(f"Read {len(aRoute)} routes from {sFilename_in}")

    graph = build_graph(aRoute)
    print(f"Built graph with {graph.get_node_count()} {config.sLocation_name} "
          f"and {graph.get_edge_count()} routes")

    summary = summarize_network(graph, config)
    export_degree_distribution(summary.degree_distribution, sFilename_out)
    print(f"Exported degree distribution to {sFilename_out} for plotting\n")
    print(format_report(summary, config))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Structural analytics of a directed route network")
    parser.add_argument("routes", help="Delimited text file with origin and destination in the first two columns")
    parser.add_argument("--export", default="degree_distribution.csv",
                        help="Output file for the degree distribution (default: %(default)s)")
    parser.add_argument("--top", type=int, default=AnalysisConfig.iTop_n,
                        help="Number of hubs to report (default: %(default)s)")
    parser.add_argument("--location-name", default=AnalysisConfig.sLocation_name,
                        help="Plural noun for locations in the report (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = AnalysisConfig(iTop_n=args.top, sLocation_name=args.location_name)
    except ValueError as e:
        parser.error(str(e))

    try:
        run(args.routes, args.export, config)
    except (OSError, ValueError) as e:
        logger.error(f"Route analysis failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
