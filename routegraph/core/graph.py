"""
Core graph data structure for route network representation.

This module provides the fundamental graph structure without analysis operations.
Locations live in a dense arena indexed by ID and each location keeps an ordered
list of outgoing edges, so no node or edge object points at another.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..classes.location import pylocation
from ..classes.route import pyroute

logger = logging.getLogger(__name__)

RouteLike = Union[pyroute, Tuple[str, str]]


class RouteGraph:
    """
    Core graph data structure for route networks.

    This class manages the fundamental graph representation. It provides:
    - Location ID management (first-seen order)
    - Adjacency list maintenance
    - Node and edge counts in constant time
    - Basic graph queries (location lookup, successors, self-loops)

    Every edge has weight 1. The graph trusts its input to hold unique ordered
    pairs: a repeated route is stored as a parallel edge.
    """

    def __init__(self, routes: Iterable[RouteLike]):
        """
        Initialize the route network graph from routes.

        Args:
            routes: Routes, either pyroute objects or (origin, destination) tuples
        """
        self.aRoute: List[pyroute] = [self._as_route(route) for route in routes]

        # Location mappings
        self.label_to_id: Dict[str, int] = {}
        self.id_to_location: Dict[int, pylocation] = {}
        self.aLocation: List[pylocation] = []

        # Edge mappings
        self.aRoute_edges: Dict[int, Tuple[int, int]] = {}

        # Graph structure, one outgoing list per location
        self.adjacency_list: List[List[Tuple[int, int]]] = []

        self._build_graph()

    @staticmethod
    def _as_route(route: RouteLike) -> pyroute:
        if isinstance(route, pyroute):
            return route
        if isinstance(route, tuple):
            return pyroute.from_pair(route)
        raise TypeError(f"Expected pyroute or (origin, destination) tuple, got {type(route).__name__}")

    def _add_location(self, sLabel: str) -> int:
        """Look up a location ID, allocating the next one if the label is new."""
        location_id = self.label_to_id.get(sLabel)
        if location_id is None:
            location_id = len(self.aLocation)
            location = pylocation(sLabel, location_id)
            self.label_to_id[sLabel] = location_id
            self.id_to_location[location_id] = location
            self.aLocation.append(location)
            self.adjacency_list.append([])
        return location_id

    def _build_graph(self):
        """
        Build the graph structure from routes.
        This is the core method that constructs the adjacency list representation.
        """
        for route_idx, route in enumerate(self.aRoute):
            origin_id = self._add_location(route.sOrigin)
            destination_id = self._add_location(route.sDestination)

            self.aRoute_edges[route_idx] = (origin_id, destination_id)
            self.adjacency_list[origin_id].append((destination_id, route_idx))

        logger.debug(f"Built graph with {self.get_node_count()} locations and {self.get_edge_count()} routes "
                     f"({self.count_self_loops()} self-loops)")

    def get_node_count(self) -> int:
        """Get the total number of unique locations in the network."""
        return len(self.aLocation)

    def get_edge_count(self) -> int:
        """Get the total number of routes in the network."""
        return len(self.aRoute_edges)

    def get_locations(self) -> List[pylocation]:
        """
        Get all unique locations in ID order.

        Returns:
            List[pylocation]: Copy of the location arena
        """
        return self.aLocation.copy()

    def get_location_by_id(self, location_id: int) -> Optional[pylocation]:
        """
        Get a location by its internal graph ID.

        Args:
            location_id: Internal location ID (0-based)

        Returns:
            The location object, or None if not found
        """
        return self.id_to_location.get(location_id)

    def get_location_id(self, sLabel: str) -> Optional[int]:
        """
        Get the internal graph ID for a location label.

        Args:
            sLabel: The location label to look up

        Returns:
            Internal location ID (0-based), or None if not found
        """
        return self.label_to_id.get(sLabel)

    def get_label(self, location_id: int) -> str:
        return self.aLocation[location_id].sLabel

    def get_successors(self, location_id: int) -> List[int]:
        """Get target IDs of the outgoing edges of a location, in insertion order."""
        return [target_id for target_id, _ in self.adjacency_list[location_id]]

    def get_out_degree(self, location_id: int, iFlag_include_self_loop: bool = True) -> int:
        """
        Count outgoing edges of a location.

        Args:
            location_id: Internal location ID
            iFlag_include_self_loop: If False, edges back to the same location are not counted

        Returns:
            Number of outgoing edges
        """
        if iFlag_include_self_loop:
            return len(self.adjacency_list[location_id])
        return sum(1 for target_id in self.get_successors(location_id) if target_id != location_id)

    def count_self_loops(self) -> int:
        return sum(1 for route in self.aRoute if route.is_self_loop())


def build_graph(routes: Iterable[RouteLike]) -> RouteGraph:
    """
    Build a directed route graph.

    Location IDs are allocated in first-seen order, origin before destination,
    and one weight-1 edge is inserted per route. No deduplication happens here.

    Args:
        routes: Routes, either pyroute objects or (origin, destination) tuples

    Returns:
        The populated RouteGraph
    """
    return RouteGraph(routes)
