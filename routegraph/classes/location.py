"""
Location (node) representation for route networks.
"""

from typing import Any


class pylocation:
    """
    A uniquely labelled point in a route network, such as an airport.

    The label identifies the location; lLocationID is the dense graph ID
    assigned by the graph in first-seen order (-1 until assigned).
    """

    def __init__(self, sLabel: str, lLocationID: int = -1):
        """
        Initialize a location.

        Args:
            sLabel: Unique location label
            lLocationID: Internal graph ID, -1 if not yet assigned
        """
        if not isinstance(sLabel, str):
            raise TypeError(f"Location label must be a string, got {type(sLabel).__name__}")
        self.sLabel = sLabel
        self.lLocationID = lLocationID

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, pylocation):
            return NotImplemented
        return self.sLabel == other.sLabel

    def __hash__(self) -> int:
        return hash(self.sLabel)

    def __repr__(self) -> str:
        return f"pylocation({self.sLabel!r}, lLocationID={self.lLocationID})"

    def __str__(self) -> str:
        return self.sLabel
