"""
Shortest path analysis for route networks.

This module provides all-pairs shortest hop counts (Floyd-Warshall) and the
average path length over reachable location pairs.
"""

import logging
import time
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from ..core.graph import RouteGraph

logger = logging.getLogger(__name__)


class NegativeCycleError(ValueError):
    """Raised when edge weights create a negative cycle."""


def _unit_weight(route_idx: int) -> int:
    return 1


class PathFinder:
    """
    Path finding algorithms for route networks.

    This class provides methods for:
    - All-pairs shortest hop counts
    - Average path length over reachable pairs
    - Distance lookup between two labelled locations

    Floyd-Warshall runs in O(V^3) time and O(V^2) memory, which bounds the
    network size this class can handle.
    """

    def __init__(self, graph: RouteGraph):
        """
        Initialize the path finder.

        Args:
            graph: RouteGraph instance to analyze
        """
        self.graph = graph
        self._distance_cache: Optional[Dict[Tuple[int, int], int]] = None

    def floyd_warshall(self, edge_weight: Callable[[int], int] = _unit_weight) -> Dict[Tuple[int, int], int]:
        """
        Compute shortest path lengths between all ordered pairs of locations.

        Args:
            edge_weight: Maps a route index to its weight; every route weighs 1 by default

        Returns:
            Mapping of (origin_id, destination_id) to path length, holding only
            reachable pairs with origin_id != destination_id

        Raises:
            NegativeCycleError: If the weights produce a negative cycle
        """
        node_count = self.graph.get_node_count()
        dist = np.full((node_count, node_count), np.inf)
        np.fill_diagonal(dist, 0.0)

        for route_idx, (origin_id, destination_id) in self.graph.aRoute_edges.items():
            weight = edge_weight(route_idx)
            if weight < dist[origin_id, destination_id]:
                dist[origin_id, destination_id] = weight

        for k in range(node_count):
            np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :], out=dist)

        if node_count and np.any(np.diagonal(dist) < 0):
            raise NegativeCycleError("Graph contains a negative cycle")

        np.fill_diagonal(dist, np.inf)
        origin_ids, destination_ids = np.nonzero(np.isfinite(dist))
        return {
            (int(i), int(j)): int(dist[i, j])
            for i, j in zip(origin_ids, destination_ids)
        }

    def get_distance_matrix(self) -> Dict[Tuple[int, int], int]:
        """Get the unit-weight distance matrix, computing it once."""
        if self._distance_cache is None:
            self._distance_cache = self.floyd_warshall()
        return self._distance_cache

    def calculate_average_path_length(self) -> float:
        """
        Calculate the average number of hops between reachable location pairs.

        Unreachable pairs and a location paired with itself are excluded.

        Returns:
            Average hop count, or 0.0 when no pair is reachable or the
            shortest path computation fails
        """
        start_time = time.time()
        logger.info(f"Calculating average path length over {self.graph.get_node_count()} locations")

        try:
            distances = self.get_distance_matrix()
        except NegativeCycleError as e:
            logger.warning(f"Shortest path computation failed, reporting 0.0: {e}")
            return 0.0

        if not distances:
            return 0.0

        average = sum(distances.values()) / len(distances)
        logger.info(f"Average path length computed over {len(distances)} pairs "
                    f"in {time.time() - start_time:.3f}s")
        return average

    def get_distance(self, sOrigin: str, sDestination: str) -> Optional[int]:
        """
        Get the shortest hop count between two locations.

        Args:
            sOrigin: Origin location label
            sDestination: Destination location label

        Returns:
            Hop count, or None if unreachable or both labels are the same location

        Raises:
            KeyError: If a label is not in the graph
        """
        origin_id = self.graph.get_location_id(sOrigin)
        destination_id = self.graph.get_location_id(sDestination)
        if origin_id is None:
            raise KeyError(sOrigin)
        if destination_id is None:
            raise KeyError(sDestination)
        return self.get_distance_matrix().get((origin_id, destination_id))
