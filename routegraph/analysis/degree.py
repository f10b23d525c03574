"""
Degree analysis for route networks.

This module computes the out-degree distribution and hub ranking of a route graph.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..core.graph import RouteGraph

logger = logging.getLogger(__name__)


class DegreeAnalyzer:
    """
    Degree statistics for route networks.

    This class provides methods for:
    - Building the out-degree distribution (self-loops excluded)
    - Ranking hubs by total out-degree (self-loops included)
    - Maximum and average degree

    The two degree notions differ on purpose: the distribution ignores routes
    that return to their origin while the hub ranking counts every route.
    """

    def __init__(self, graph: RouteGraph):
        """
        Initialize the degree analyzer.

        Args:
            graph: RouteGraph instance to analyze
        """
        self.graph = graph

    def calculate_degree_distribution(self) -> Dict[int, int]:
        """
        Calculate how many locations have each out-degree.

        Returns:
            Mapping of out-degree (self-loops excluded) to number of locations.
            The counts sum to the number of locations.
        """
        degree_distribution: Dict[int, int] = {}

        for location_id in range(self.graph.get_node_count()):
            degree = self.graph.get_out_degree(location_id, iFlag_include_self_loop=False)
            degree_distribution[degree] = degree_distribution.get(degree, 0) + 1

        logger.debug(f"Degree distribution has {len(degree_distribution)} distinct degrees")
        return degree_distribution

    def get_hubs(self, top_n: int = 10) -> List[Tuple[str, int]]:
        """
        Get the most connected locations.

        Ties keep first-seen order because the sort is stable.

        Args:
            top_n: Number of hubs to return; all locations if it exceeds the count

        Returns:
            List of (label, out-degree) pairs sorted by descending out-degree
        """
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}")

        location_degrees = [
            (location.sLabel, self.graph.get_out_degree(location.lLocationID))
            for location in self.graph.aLocation
        ]
        location_degrees.sort(key=lambda item: item[1], reverse=True)
        return location_degrees[:top_n]

    def get_max_degree(self, degree_distribution: Optional[Dict[int, int]] = None) -> int:
        """Largest out-degree in the distribution, 0 when it is empty."""
        if degree_distribution is None:
            degree_distribution = self.calculate_degree_distribution()
        return max(degree_distribution.keys(), default=0)

    def get_average_degree(self) -> float:
        """
        Average connections per location, counting each route at both ends.

        Returns:
            2 * edge_count / node_count, or 0.0 for an empty graph
        """
        node_count = self.graph.get_node_count()
        if node_count == 0:
            return 0.0
        return self.graph.get_edge_count() * 2.0 / node_count
