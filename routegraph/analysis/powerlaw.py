"""
Threshold heuristic for power-law shaped degree distributions.

This is not a statistical fit: it checks that most locations have a low degree
while very few sit near the maximum degree.
"""

import logging
from typing import Dict, Optional

from ..config import AnalysisConfig

logger = logging.getLogger(__name__)


def analyze_power_law(degree_distribution: Dict[int, int],
                      config: Optional[AnalysisConfig] = None) -> bool:
    """
    Check whether a degree distribution looks like a power law.

    With the default configuration the verdict is True when more than 60% of
    locations have degree <= 2 and fewer than 5% have a degree of at least
    int(max_degree * 0.8). Percentages are compared on integers.

    Args:
        degree_distribution: Mapping of degree to number of locations
        config: Optional thresholds, defaults to AnalysisConfig()

    Returns:
        True if the distribution is likely power-law shaped, False otherwise
        (including for an empty distribution)
    """
    if config is None:
        config = AnalysisConfig()

    total_nodes = sum(degree_distribution.values())
    if total_nodes == 0:
        return False

    max_degree = max(degree_distribution.keys(), default=0)
    high_degree_threshold = int(max_degree * config.dHigh_degree_fraction)

    low_degree_nodes = sum(count for degree, count in degree_distribution.items()
                           if degree <= config.iLow_degree_max)
    high_degree_nodes = sum(count for degree, count in degree_distribution.items()
                            if degree >= high_degree_threshold)

    logger.debug(f"Power-law check: {low_degree_nodes} low-degree and {high_degree_nodes} "
                 f"high-degree (>= {high_degree_threshold}) of {total_nodes} locations")

    return (low_degree_nodes * 100 > total_nodes * config.iLow_degree_percent
            and high_degree_nodes * 100 < total_nodes * config.iHigh_degree_percent)
