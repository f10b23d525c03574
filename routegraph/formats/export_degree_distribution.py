"""
Export a degree distribution to a delimited text file.
"""

import logging
from typing import Dict

import pandas as pd

logger = logging.getLogger(__name__)


def export_degree_distribution(degree_distribution: Dict[int, int], sFilename_out: str) -> None:
    """
    Write a degree distribution as a two-column CSV file.

    The header is ``degree,count`` and rows follow the iteration order of the
    mapping.

    Args:
        degree_distribution: Mapping of degree to number of locations
        sFilename_out: Output file path
    """
    df = pd.DataFrame(list(degree_distribution.items()), columns=["degree", "count"])
    df.to_csv(sFilename_out, index=False)
    logger.info(f"Exported degree distribution with {len(df)} rows to {sFilename_out}")
