"""
Route (directed edge record) representation for route networks.
"""

from typing import Any, Tuple


class pyroute:
    """
    One directed route between two location labels.

    Routes compare equal when their ordered (origin, destination) pairs
    match, so A->B and B->A are different routes.
    """

    def __init__(self, sOrigin: str, sDestination: str):
        """
        Initialize a route.

        Args:
            sOrigin: Origin location label
            sDestination: Destination location label
        """
        self.sOrigin = sOrigin
        self.sDestination = sDestination

    @classmethod
    def from_pair(cls, pair: Tuple[str, str]) -> "pyroute":
        """Create a route from an (origin, destination) tuple."""
        if len(pair) != 2:
            raise ValueError(f"Route pair must have exactly 2 fields, got {len(pair)}")
        return cls(pair[0], pair[1])

    def as_pair(self) -> Tuple[str, str]:
        return (self.sOrigin, self.sDestination)

    def is_self_loop(self) -> bool:
        """Check whether the route starts and ends at the same location."""
        return self.sOrigin == self.sDestination

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, pyroute):
            return NotImplemented
        return self.as_pair() == other.as_pair()

    def __hash__(self) -> int:
        return hash(self.as_pair())

    def __repr__(self) -> str:
        return f"pyroute({self.sOrigin!r}, {self.sDestination!r})"
