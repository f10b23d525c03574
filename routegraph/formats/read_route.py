"""
Read routes from a delimited text file.

The first two columns hold the origin and destination labels; a header row is
expected and any further columns are ignored.
"""

import logging
from typing import List

import pandas as pd

from ..classes.route import pyroute

logger = logging.getLogger(__name__)


def read_route_csv(sFilename_in: str, sDelimiter: str = ",") -> List[pyroute]:
    """
    Read unique, non-empty routes from a delimited text file.

    Rows with an empty origin or destination are skipped. A repeated ordered
    (origin, destination) pair is dropped, keeping the first occurrence, so the
    returned routes keep file order. Routes from a location to itself are kept.

    Args:
        sFilename_in: Path of the delimited text file
        sDelimiter: Field delimiter

    Returns:
        List of pyroute objects in first-seen order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file has fewer than two columns
    """
    df = pd.read_csv(sFilename_in, sep=sDelimiter, dtype=str,
                     keep_default_na=False, na_filter=False, index_col=False)

    if df.shape[1] < 2:
        raise ValueError(f"Route file {sFilename_in} needs an origin and a destination column, "
                         f"found {df.shape[1]} column(s)")

    pairs = df.iloc[:, :2].fillna("")
    pairs.columns = ["origin", "destination"]
    nRow = len(pairs)

    pairs = pairs[(pairs["origin"] != "") & (pairs["destination"] != "")]
    nEmpty = nRow - len(pairs)

    pairs = pairs.drop_duplicates(keep="first")
    nDuplicate = nRow - nEmpty - len(pairs)

    aRoute = [pyroute(origin, destination)
              for origin, destination in pairs.itertuples(index=False, name=None)]

    logger.info(f"Read {len(aRoute)} routes from {sFilename_in} "
                f"({nEmpty} with empty fields and {nDuplicate} duplicates skipped)")
    return aRoute
