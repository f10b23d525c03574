"""
Summary statistics and console report for route networks.

This module gathers the outputs of the analyzers into a NetworkSummary and
renders it as text. It only passes results through; no analysis happens here.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..analysis.degree import DegreeAnalyzer
from ..analysis.pathfinding import PathFinder
from ..analysis.powerlaw import analyze_power_law
from ..config import AnalysisConfig
from ..core.graph import RouteGraph

logger = logging.getLogger(__name__)


@dataclass
class NetworkSummary:
    """Summary statistics of one route network."""

    node_count: int = 0
    edge_count: int = 0
    max_degree: int = 0
    average_degree: float = 0.0
    hubs: List[Tuple[str, int]] = field(default_factory=list)
    is_power_law: bool = False
    average_path_length: float = 0.0
    degree_distribution: Dict[int, int] = field(default_factory=dict)


def summarize_network(graph: RouteGraph, config: Optional[AnalysisConfig] = None) -> NetworkSummary:
    """
    Run every analysis on a graph and collect the results.

    Args:
        graph: RouteGraph instance to summarize
        config: Optional analysis parameters, defaults to AnalysisConfig()

    Returns:
        NetworkSummary with degree, hub, power-law and path length results
    """
    if config is None:
        config = AnalysisConfig()

    degree_analyzer = DegreeAnalyzer(graph)
    degree_distribution = degree_analyzer.calculate_degree_distribution()

    summary = NetworkSummary(
        node_count=graph.get_node_count(),
        edge_count=graph.get_edge_count(),
        max_degree=degree_analyzer.get_max_degree(degree_distribution),
        average_degree=degree_analyzer.get_average_degree(),
        hubs=degree_analyzer.get_hubs(config.iTop_n),
        is_power_law=analyze_power_law(degree_distribution, config),
        degree_distribution=degree_distribution,
    )
    summary.average_path_length = PathFinder(graph).calculate_average_path_length()

    logger.debug(f"Summarized network with {summary.node_count} locations")
    return summary


def format_report(summary: NetworkSummary, config: Optional[AnalysisConfig] = None) -> str:
    """
    Render a NetworkSummary as console text.

    Args:
        summary: Summary to render
        config: Optional parameters; only the location noun and hub count are used

    Returns:
        Multi-line report text
    """
    if config is None:
        config = AnalysisConfig()
    sName = config.sLocation_name
    sName_title = sName[:1].upper() + sName[1:]
    sName_singular = sName[:-1] if sName.endswith("s") else sName

    lines = [
        "--- Degree Distribution Analysis ---",
        f"Total {sName}: {summary.node_count}",
        f"Maximum connections (degree): {summary.max_degree}",
        f"Average connections per {sName_singular}: {summary.average_degree:.2f}",
        "",
        f"--- Top {config.iTop_n} Most Connected {sName_title} ---",
    ]
    for i, (sLabel, degree) in enumerate(summary.hubs, start=1):
        lines.append(f"{i}. {sLabel} - {degree} connections")

    lines.append("")
    lines.append("Does the degree distribution follow a power law? "
                 + ("Likely yes" if summary.is_power_law else "Likely no"))
    lines.append(f"Average Path Length (in hops): {summary.average_path_length:.2f}")
    return "\n".join(lines)
