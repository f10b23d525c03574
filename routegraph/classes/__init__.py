"""
Core data classes for route network representation.

This module contains the fundamental data structures used throughout
the routegraph library.
"""

from .location import pylocation
from .route import pyroute

__all__ = [
    'pylocation',
    'pyroute',
]
