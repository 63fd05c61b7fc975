"""
Data schemas for the Lagrange interpolation engine.
"""

from .enums import PlotSeries, ValidationErrorKind
from .results import BasisTerm, InterpolationFailure, InterpolationResult, PlotPoint
from .samples import Sample, normalize_samples, to_sample, x_values

__all__ = [
    # Enums
    "ValidationErrorKind",
    "PlotSeries",
    # Inputs
    "Sample",
    "normalize_samples",
    "to_sample",
    "x_values",
    # Results
    "BasisTerm",
    "PlotPoint",
    "InterpolationResult",
    "InterpolationFailure",
]
