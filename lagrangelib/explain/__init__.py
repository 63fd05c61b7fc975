"""Recorded derivation of the Lagrange sum."""

from .trace import (
    TraceResult,
    build_basis_term,
    compute_with_trace,
    term_display,
    validate_samples,
)

__all__ = [
    "TraceResult",
    "build_basis_term",
    "compute_with_trace",
    "term_display",
    "validate_samples",
]
