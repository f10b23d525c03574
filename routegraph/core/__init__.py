"""
Core graph data structures and management.

This module contains the fundamental graph representation and the facade
class without the analysis algorithms themselves.
"""

from .graph import RouteGraph, build_graph

__all__ = [
    'RouteGraph',
    'build_graph',
]
