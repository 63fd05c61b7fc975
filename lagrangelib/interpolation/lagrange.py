"""
Classical Lagrange interpolation in float64.
"""
import math
from typing import Sequence

import numpy as np
from numpy.polynomial import polynomial as P

from lagrangelib.schema.samples import Sample

from .base import Interpolator


def evaluate_at(samples: Sequence[Sample], x: float) -> float:
    """Evaluate the Lagrange polynomial through ``samples`` at ``x``.

    Computes sum_j y_j * prod_{k != j} (x - x_k) / (x_j - x_k). A single
    sample yields the constant y_0.

    Returns NaN for an empty sample set or when any x_j - x_k is exactly zero;
    callers treat NaN as a failure signal.
    """
    n = len(samples)
    if n == 0:
        return math.nan

    total = 0.0
    for j in range(n):
        xj = samples[j].x
        basis = 1.0
        for k in range(n):
            if j == k:
                continue
            gap = xj - samples[k].x
            if gap == 0:
                return math.nan
            basis *= (x - samples[k].x) / gap
        total += samples[j].y * basis
    return total


class LagrangeInterpolator(Interpolator):
    """Lagrange interpolating polynomial through every sample.

    Exact at the samples; degree is at most n - 1.
    """

    @property
    def degree(self) -> int:
        return len(self.xs) - 1

    def interpolate(self, x: float) -> float:
        """Evaluate the polynomial at x."""
        return evaluate_at(self.samples, float(x))

    def coefficients(self) -> np.ndarray:
        """Power-basis coefficients in ascending degree.

        Built as sum_j (y_j / D_j) * prod_{k != j} (x - x_k) with numpy
        polynomial arithmetic.
        """
        n = len(self.xs)
        coeffs = np.zeros(n)
        for j in range(n):
            numerator = np.array([1.0])
            denominator = 1.0
            for k in range(n):
                if j == k:
                    continue
                numerator = P.polymul(numerator, [-self.xs[k], 1.0])
                denominator *= self.xs[j] - self.xs[k]
            term = numerator * (self.ys[j] / denominator)
            coeffs[: len(term)] += term
        return coeffs
