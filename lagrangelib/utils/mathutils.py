"""Numeric helpers shared by the evaluator and the curve sampler."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import numpy as np


def product(values: Iterable[float]) -> float:
    """
    Multiply ``values`` left to right in float64.

    The empty product is 1.0, so a single-sample basis polynomial is the
    constant 1.

    Parameters
    ----------
    values : Iterable[float]
        Factors to multiply

    Returns
    -------
    float
        The product of all factors
    """
    result = 1.0
    for value in values:
        result *= value
    return result


def linear_grid(start: float, end: float, intervals: int) -> np.ndarray:
    """Return ``intervals + 1`` evenly spaced points from ``start`` to ``end`` inclusive."""
    if intervals < 1:
        raise ValueError("intervals must be at least 1")
    return np.linspace(start, end, intervals + 1)


def has_duplicates(values: Sequence[float]) -> bool:
    """True when two entries of ``values`` compare equal."""
    return len(np.unique(np.asarray(values, dtype=float))) != len(values)


def find_close(xs: Sequence[float], target: float, tolerance: float) -> Optional[int]:
    """Index of the first entry of ``xs`` strictly within ``tolerance`` of ``target``."""
    for idx, x in enumerate(xs):
        if abs(x - target) < tolerance:
            return idx
    return None


def padded_domain(xs: Sequence[float], ratio: float, zero_range_padding: float) -> List[float]:
    """
    Extend ``[min(xs), max(xs)]`` by ``ratio`` of its width on both sides.

    A degenerate range (all values equal) is padded by ``zero_range_padding``
    instead so the domain never collapses to a point.
    """
    if len(xs) == 0:
        raise ValueError("xs must not be empty")
    lower = float(min(xs))
    upper = float(max(xs))
    width = upper - lower
    padding = zero_range_padding if width == 0 else width * ratio
    return [lower - padding, upper + padding]
