"""Result dataclasses returned by the interpolation engine.

This module defines the per-term trace records, plot points and the two
outcomes of :func:`lagrangelib.compute`: a successful
:class:`InterpolationResult` or an :class:`InterpolationFailure`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

from lagrangelib.config import DEFAULT_CONFIG

from .enums import PlotSeries, ValidationErrorKind


@dataclass(frozen=True)
class BasisTerm:
    """Recorded derivation of one Lagrange basis term.

    Attributes:
        term_index: Position of the sample in the input (0-based)
        y_value: Sample ordinate y_j
        numerator_symbolic: Product of (x - x_k) factors, "1" for a single sample
        denominator_symbolic: Product of (x_j - x_k) factors with literal values
        denominator_value: D_j = prod_{k != j} (x_j - x_k)
        basis_symbolic: "(numerator) / D_j" display of L_j(x)
        numerator_at_query_symbolic: (q - x_k) factors joined by "*"
        numerator_at_query: N_j(q) = prod_{k != j} (q - x_k)
        basis_value: L_j(q) = N_j(q) / D_j
        term_symbolic: "y_j * L_j(x)" display
        term_value: Contribution y_j * L_j(q)
    """

    term_index: int
    y_value: float
    numerator_symbolic: str
    denominator_symbolic: str
    denominator_value: float
    basis_symbolic: str
    numerator_at_query_symbolic: str
    numerator_at_query: float
    basis_value: float
    term_symbolic: str
    term_value: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "termIndex": self.term_index,
            "yValue": self.y_value,
            "basisNumeratorSymbolic": self.numerator_symbolic,
            "basisDenominatorSymbolic": self.denominator_symbolic,
            "basisDenominatorValue": self.denominator_value,
            "basisPolynomialSymbolic": self.basis_symbolic,
            "basisNumeratorAtXValues": self.numerator_at_query_symbolic,
            "basisNumeratorAtXProduct": self.numerator_at_query,
            "basisPolynomialValueAtX": self.basis_value,
            "termSymbolic": self.term_symbolic,
            "termValueAtX": self.term_value,
        }


@dataclass
class PlotPoint:
    """Sparse chart record; absent series are ``None``."""

    x: float
    original: Optional[float] = None
    interpolated: Optional[float] = None
    target: Optional[float] = None

    def to_dict(self) -> Dict[str, float]:
        payload = {"x": self.x}
        for series in PlotSeries:
            value = getattr(self, series.value)
            if value is not None:
                payload[series.value] = value
        return payload


@dataclass(frozen=True)
class InterpolationResult:
    """Successful outcome of an interpolation call."""

    interpolated_value: float
    query_x: float
    term_displays: List[str]
    trace: List[BasisTerm]
    plot_points: List[PlotPoint] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True

    @property
    def polynomial_display(self) -> str:
        """Sum of the term displays, e.g. ``0.5000 * (x - 1)(x - 2) + ...``."""
        return " + ".join(self.term_displays)

    def target_point(self, tolerance: Optional[float] = None) -> Optional[PlotPoint]:
        """Plot point carrying the query marker, if the curve was sampled."""
        if tolerance is None:
            tolerance = DEFAULT_CONFIG.match_tolerance
        for point in self.plot_points:
            if point.target is not None and abs(point.x - self.query_x) < tolerance:
                return point
        return None

    def trace_frame(self) -> pd.DataFrame:
        """One row per basis term, indexed by ``term_index``."""
        columns = [
            "term_index",
            "y_value",
            "numerator_symbolic",
            "denominator_symbolic",
            "denominator_value",
            "numerator_at_query",
            "basis_value",
            "term_value",
        ]
        rows = [{name: getattr(term, name) for name in columns} for term in self.trace]
        return pd.DataFrame(rows, columns=columns).set_index("term_index")

    def plot_frame(self) -> pd.DataFrame:
        """Plot sequence as columns ``x, original, interpolated, target`` (NaN when absent)."""
        columns = ["x"] + [series.value for series in PlotSeries]
        rows = [
            [point.x] + [getattr(point, series.value) for series in PlotSeries]
            for point in self.plot_points
        ]
        return pd.DataFrame(rows, columns=columns, dtype=float)

    def to_dict(self) -> Dict[str, object]:
        return {
            "interpolatedValue": self.interpolated_value,
            "polynomialTermsDisplay": list(self.term_displays),
            "calculationSteps": [term.to_dict() for term in self.trace],
            "plotData": [point.to_dict() for point in self.plot_points],
            "interpolationPoint": self.query_x,
        }


@dataclass(frozen=True)
class InterpolationFailure:
    """Failed outcome of an interpolation call; never carries a substitute value."""

    error: ValidationErrorKind
    message: str
    query_x: Optional[float] = None
    # Basis terms recorded before a NaN sum; empty for input-shape failures.
    trace: List[BasisTerm] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, object]:
        return {
            "interpolatedValue": None,
            "polynomialTermsDisplay": [],
            "calculationSteps": [term.to_dict() for term in self.trace],
            "error": self.message,
            "errorKind": self.error.value,
            "interpolationPoint": self.query_x,
        }
