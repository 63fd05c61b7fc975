"""Tunable constants for tracing and curve sampling."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class InterpolationConfig:
    """Configuration shared by the explainer and the curve sampler.

    Attributes:
        match_tolerance: Distance under which two x-coordinates are the same plot point
        padding_ratio: Plot domain padding as a fraction of the sample x-range
        zero_range_padding: Padding used when every sample has the same x
        plot_intervals: Number of intervals across the padded domain (points = intervals + 1)
        coefficient_decimals: Decimals shown for term coefficients
        denominator_decimals: Decimals shown for the basis denominator
        include_plot: Whether :func:`lagrangelib.compute` samples the curve
    """

    match_tolerance: float = 1e-9
    padding_ratio: float = 0.2
    zero_range_padding: float = 1.0
    plot_intervals: int = 100
    coefficient_decimals: int = 4
    denominator_decimals: int = 6
    include_plot: bool = True

    def __post_init__(self):
        if self.match_tolerance < 0:
            raise ValueError("match_tolerance must be non-negative")
        if self.padding_ratio < 0:
            raise ValueError("padding_ratio must be non-negative")
        if self.zero_range_padding <= 0:
            raise ValueError("zero_range_padding must be positive")
        if self.plot_intervals < 1:
            raise ValueError("plot_intervals must be at least 1")
        if self.coefficient_decimals < 0 or self.denominator_decimals < 0:
            raise ValueError("decimal places must be non-negative")

    def with_overrides(self, **changes) -> "InterpolationConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = InterpolationConfig()
