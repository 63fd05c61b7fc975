"""
Core enumeration types for the Lagrange interpolation engine.
"""

from enum import Enum


class ValidationErrorKind(Enum):
    """Failure kinds reported by :func:`lagrangelib.compute`."""

    EMPTY_INPUT = "EMPTY_INPUT"
    DUPLICATE_X = "DUPLICATE_X"
    NUMERIC_INSTABILITY = "NUMERIC_INSTABILITY"


class PlotSeries(Enum):
    """Series carried by a plot point."""

    ORIGINAL = "original"
    INTERPOLATED = "interpolated"
    TARGET = "target"
