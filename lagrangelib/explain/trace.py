"""Traced Lagrange evaluation.

Every basis term is recorded with its symbolic numerator and denominator, the
numeric denominator D_j, the numerator evaluated at the query point, the basis
value L_j(q) and the term contribution y_j * L_j(q). The traced sum is the
interpolated value reported to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import logging
import math

from lagrangelib.config import DEFAULT_CONFIG, InterpolationConfig
from lagrangelib.errors import (
    ZERO_DENOMINATOR_MESSAGE,
    DuplicateXError,
    EmptyInputError,
    NumericInstabilityError,
)
from lagrangelib.schema.results import BasisTerm
from lagrangelib.schema.samples import Sample, x_values
from lagrangelib.utils.formatting import (
    difference_factor,
    format_fixed,
    format_number,
    join_factors,
)
from lagrangelib.utils.mathutils import has_duplicates, product

logger = logging.getLogger(__name__)

_TRIVIAL = "1"


@dataclass(frozen=True)
class TraceResult:
    """Aggregate of a traced evaluation, before any curve sampling."""

    value: float
    query_x: float
    term_displays: List[str]
    trace: List[BasisTerm]


def validate_samples(samples: Sequence[Sample]) -> None:
    """Reject empty sample sets and repeated x-coordinates."""
    if len(samples) == 0:
        raise EmptyInputError()
    if has_duplicates(x_values(samples)):
        raise DuplicateXError()


def term_display(y_value: float, denominator: float, numerator_symbolic: str, decimals: int) -> str:
    """Coefficient y_j / D_j followed by the symbolic numerator.

    The single-sample case has the trivial numerator and prints y_j alone.
    """
    if numerator_symbolic == _TRIVIAL:
        return format_fixed(y_value, decimals)
    return f"{format_fixed(y_value / denominator, decimals)} * {numerator_symbolic}"


def build_basis_term(
    samples: Sequence[Sample],
    j: int,
    query_x: float,
    config: InterpolationConfig = DEFAULT_CONFIG,
) -> BasisTerm:
    """Derive basis term ``j`` at ``query_x``.

    Raises:
        DuplicateXError: if D_j is exactly zero
    """
    xj = samples[j].x
    yj = samples[j].y
    others = [s.x for k, s in enumerate(samples) if k != j]

    numerator_symbolic = join_factors(difference_factor("x", xk) for xk in others)
    denominator_symbolic = join_factors(difference_factor(format_number(xj), xk) for xk in others)
    denominator = product(xj - xk for xk in others)
    if denominator == 0:
        raise DuplicateXError(ZERO_DENOMINATOR_MESSAGE)

    at_query_symbolic = join_factors(
        (difference_factor(format_number(query_x), xk) for xk in others), separator="*"
    )
    at_query = product(query_x - xk for xk in others)
    basis_value = at_query / denominator

    basis_symbolic = (
        f"({numerator_symbolic}) / {format_fixed(denominator, config.denominator_decimals)}"
    )
    if others:
        term_symbolic = f"{format_fixed(yj, config.coefficient_decimals)} * {basis_symbolic}"
    else:
        term_symbolic = format_fixed(yj, config.coefficient_decimals)

    return BasisTerm(
        term_index=j,
        y_value=yj,
        numerator_symbolic=numerator_symbolic,
        denominator_symbolic=denominator_symbolic,
        denominator_value=denominator,
        basis_symbolic=basis_symbolic,
        numerator_at_query_symbolic=at_query_symbolic,
        numerator_at_query=at_query,
        basis_value=basis_value,
        term_symbolic=term_symbolic,
        term_value=yj * basis_value,
    )


def compute_with_trace(
    samples: Sequence[Sample],
    query_x: float,
    config: InterpolationConfig = DEFAULT_CONFIG,
) -> TraceResult:
    """Evaluate the interpolating polynomial at ``query_x`` and record each term.

    Raises:
        EmptyInputError: no samples
        DuplicateXError: repeated x, or a zero basis denominator
        NumericInstabilityError: the summed value is NaN
    """
    validate_samples(samples)
    query_x = float(query_x)

    trace: List[BasisTerm] = []
    displays: List[str] = []
    total = 0.0
    for j in range(len(samples)):
        term = build_basis_term(samples, j, query_x, config)
        trace.append(term)
        displays.append(
            term_display(
                term.y_value,
                term.denominator_value,
                term.numerator_symbolic,
                config.coefficient_decimals,
            )
        )
        total += term.term_value

    if math.isnan(total):
        logger.warning("Lagrange sum is NaN for %s samples at x=%s", len(samples), query_x)
        raise NumericInstabilityError(trace=trace)

    logger.debug("Traced %s basis terms at x=%s: sum=%s", len(trace), query_x, total)
    return TraceResult(value=total, query_x=query_x, term_displays=displays, trace=trace)
