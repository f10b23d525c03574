"""
routegraph - Route Network Graph Analysis Library

A Python library for structural analytics of directed route networks, such as
airline routes between airports: degree distribution, hub ranking, a power-law
shape heuristic and average shortest path length.

Main Classes:
    pyroutegraph: Main class for route network analysis (facade)
    pylocation: Location (node) representation in the network
    pyroute: Directed route (edge record) representation

Example:
    >>> from routegraph import pyroutegraph, read_route_csv
    >>> graph = pyroutegraph(read_route_csv("routes.csv"))
    >>> graph.get_hubs(10)
    >>> graph.calculate_average_path_length()
"""

__version__ = "0.1.0"

from routegraph.classes.location import pylocation
from routegraph.classes.route import pyroute
from routegraph.config import AnalysisConfig
from routegraph.core.graph import RouteGraph, build_graph
from routegraph.core.routegraph import pyroutegraph
from routegraph.formats.read_route import read_route_csv
from routegraph.formats.export_degree_distribution import export_degree_distribution

__all__ = [
    'pyroutegraph',
    'pylocation',
    'pyroute',
    'AnalysisConfig',
    'RouteGraph',
    'build_graph',
    'read_route_csv',
    'export_degree_distribution',
]
