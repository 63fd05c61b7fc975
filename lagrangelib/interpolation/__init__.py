"""
Interpolation methods.

This module provides the float64 Lagrange evaluator used both for the traced
computation and for sampling the curve.
"""

# Base classes
from .base import Interpolator

# Lagrange evaluation
from .lagrange import LagrangeInterpolator, evaluate_at

__all__ = [
    # Base classes
    'Interpolator',

    # Lagrange evaluation
    'LagrangeInterpolator',
    'evaluate_at',
]
