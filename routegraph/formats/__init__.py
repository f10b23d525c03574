"""
Readers and writers for route network data.
"""

from .read_route import read_route_csv
from .export_degree_distribution import export_degree_distribution

__all__ = [
    'read_route_csv',
    'export_degree_distribution',
]
