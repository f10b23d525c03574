"""
Configuration container for the routegraph package.

`AnalysisConfig` centralizes the parameters of the analysis pipeline: how many
hubs to report and the thresholds of the power-law heuristic. Changing the
heuristic thresholds changes the classifier's verdicts, so the defaults are
the reference values.
"""

from dataclasses import dataclass, fields

__all__ = ["AnalysisConfig"]


@dataclass
class AnalysisConfig:
    """
    Parameters for route network analysis.

    Attributes:
        iTop_n: Number of hubs reported by the summary
        iLow_degree_max: Largest degree still counted as a low-degree location
        dHigh_degree_fraction: Fraction of the maximum degree from which a location
            counts as high-degree (the product is truncated toward zero)
        iLow_degree_percent: Low-degree locations must exceed this percentage of all locations
        iHigh_degree_percent: High-degree locations must stay below this percentage of all locations
        sLocation_name: Plural noun used for locations in the console report
    """

    iTop_n: int = 10
    iLow_degree_max: int = 2
    dHigh_degree_fraction: float = 0.8
    iLow_degree_percent: int = 60
    iHigh_degree_percent: int = 5
    sLocation_name: str = "airports"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Validate parameter ranges.

        Raises:
            ValueError: If a count is negative, the fraction is outside [0, 1]
                or a percentage is outside [0, 100]
        """
        if self.iTop_n < 0:
            raise ValueError(f"iTop_n must be non-negative, got {self.iTop_n}")
        if self.iLow_degree_max < 0:
            raise ValueError(f"iLow_degree_max must be non-negative, got {self.iLow_degree_max}")
        if not 0.0 <= self.dHigh_degree_fraction <= 1.0:
            raise ValueError(f"dHigh_degree_fraction must be within [0, 1], got {self.dHigh_degree_fraction}")
        for name in ("iLow_degree_percent", "iHigh_degree_percent"):
            value = getattr(self, name)
            if not 0 <= value <= 100:
                raise ValueError(f"{name} must be within [0, 100], got {value}")
        if not self.sLocation_name:
            raise ValueError("sLocation_name must be a non-empty string")

    def describe(self) -> str:
        """Return a readable summary of the current settings."""
        lines = ["AnalysisConfig:"]
        for field in fields(self):
            lines.append(f"  {field.name} = {getattr(self, field.name)!r}")
        return "\n".join(lines)
