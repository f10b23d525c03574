"""
Main facade class for route network analysis.

This module provides the pyroutegraph class that builds the graph once and
delegates to the specialized analyzers.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import AnalysisConfig
from .graph import RouteGraph, RouteLike
from ..analysis.degree import DegreeAnalyzer
from ..analysis.pathfinding import PathFinder
from ..analysis.powerlaw import analyze_power_law
from ..operations.report import NetworkSummary, summarize_network

logger = logging.getLogger(__name__)


class pyroutegraph:
    """
    Main facade class for route network analysis.

    The graph is built from the routes at construction and is not modified
    afterwards; every method reads from it.
    """

    def __init__(self, routes: Iterable[RouteLike], config: Optional[AnalysisConfig] = None):
        """
        Initialize the route network graph from routes.

        Args:
            routes: Unique routes, either pyroute objects or (origin, destination) tuples
            config: Optional analysis parameters
        """
        self.config = config if config is not None else AnalysisConfig()

        # Initialize core graph
        self._graph = RouteGraph(routes)

        # Initialize analysis components
        self._degree_analyzer = DegreeAnalyzer(self._graph)
        self._pathfinder = PathFinder(self._graph)

    @property
    def graph(self) -> RouteGraph:
        return self._graph

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def get_node_count(self) -> int:
        """Get the total number of unique locations."""
        return self._graph.get_node_count()

    def get_edge_count(self) -> int:
        """Get the total number of routes."""
        return self._graph.get_edge_count()

    # ========================================================================
    # DEGREE ANALYSIS
    # ========================================================================

    def calculate_degree_distribution(self) -> Dict[int, int]:
        """Out-degree distribution, self-loops excluded."""
        return self._degree_analyzer.calculate_degree_distribution()

    def get_hubs(self, top_n: Optional[int] = None) -> List[Tuple[str, int]]:
        """Most connected locations, self-loops included."""
        if top_n is None:
            top_n = self.config.iTop_n
        return self._degree_analyzer.get_hubs(top_n)

    def analyze_power_law(self) -> bool:
        """Threshold heuristic on the degree distribution."""
        return analyze_power_law(self.calculate_degree_distribution(), self.config)

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def calculate_average_path_length(self) -> float:
        """Average hop count over reachable location pairs."""
        return self._pathfinder.calculate_average_path_length()

    def get_distance(self, sOrigin: str, sDestination: str) -> Optional[int]:
        """Shortest hop count between two locations."""
        return self._pathfinder.get_distance(sOrigin, sDestination)

    # ========================================================================
    # SUMMARY
    # ========================================================================

    def summarize(self) -> NetworkSummary:
        """Collect all analysis results for reporting."""
        return summarize_network(self._graph, self.config)
