"""
Reporting operations for route networks.
"""

from .report import NetworkSummary, format_report, summarize_network

__all__ = [
    'NetworkSummary',
    'format_report',
    'summarize_network',
]
