"""
Network analysis modules for route networks.

This module contains degree statistics, the power-law heuristic and
shortest path analysis.
"""

from .degree import DegreeAnalyzer
from .pathfinding import NegativeCycleError, PathFinder
from .powerlaw import analyze_power_law

__all__ = [
    'DegreeAnalyzer',
    'NegativeCycleError',
    'PathFinder',
    'analyze_power_law',
]
