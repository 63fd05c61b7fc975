"""Lagrange Interpolation Engine.

This package evaluates the Lagrange interpolating polynomial through a set of
(x, y) samples, records an auditable derivation of every basis term and samples
the curve for charting.

Key modules:
- engine: ``compute`` entry point returning a result or a failure value
- interpolation: float64 evaluator and interpolator classes
- explain: traced evaluation of each basis term
- plotting: plot-point sampling around the samples and the query point
- schema: sample, trace and result data types
"""

__version__ = "1.0.0"

from .config import DEFAULT_CONFIG, InterpolationConfig
from .engine import compute
from .errors import (
    DuplicateXError,
    EmptyInputError,
    InterpolationError,
    NumericInstabilityError,
)
from .explain import compute_with_trace
from .interpolation import LagrangeInterpolator, evaluate_at
from .plotting import sample_curve
from .schema import (
    BasisTerm,
    InterpolationFailure,
    InterpolationResult,
    PlotPoint,
    Sample,
    ValidationErrorKind,
)

__all__ = [
    "__version__",
    # Entry point
    "compute",
    "compute_with_trace",
    "evaluate_at",
    "sample_curve",
    "LagrangeInterpolator",
    # Configuration
    "InterpolationConfig",
    "DEFAULT_CONFIG",
    # Types
    "Sample",
    "BasisTerm",
    "PlotPoint",
    "InterpolationResult",
    "InterpolationFailure",
    "ValidationErrorKind",
    # Errors
    "InterpolationError",
    "EmptyInputError",
    "DuplicateXError",
    "NumericInstabilityError",
]
