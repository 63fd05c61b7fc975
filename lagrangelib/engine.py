"""Entry point combining the traced evaluation and curve sampling."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

import logging

from lagrangelib.config import DEFAULT_CONFIG, InterpolationConfig
from lagrangelib.errors import InterpolationError
from lagrangelib.explain.trace import compute_with_trace
from lagrangelib.plotting.sampling import sample_curve
from lagrangelib.schema.results import InterpolationFailure, InterpolationResult
from lagrangelib.schema.samples import normalize_samples

logger = logging.getLogger(__name__)

Outcome = Union[InterpolationResult, InterpolationFailure]


def compute(
    samples: Iterable[Any],
    query_x: float,
    config: Optional[InterpolationConfig] = None,
) -> Outcome:
    """
    Interpolate ``samples`` at ``query_x`` with a full derivation trace.

    Args:
        samples: ``Sample`` objects, ``(x, y)`` pairs or ``{"x", "y"}`` mappings
        query_x: Point at which to evaluate the polynomial
        config: Sampling and display settings (defaults to ``DEFAULT_CONFIG``)

    Returns:
        ``InterpolationResult`` on success, ``InterpolationFailure`` for empty
        input, repeated x-coordinates or a NaN sum
    """
    config = config or DEFAULT_CONFIG
    points = normalize_samples(samples)
    query_x = float(query_x)

    try:
        traced = compute_with_trace(points, query_x, config)
    except InterpolationError as exc:
        logger.debug("Interpolation rejected (%s): %s", exc.kind.value, exc.message)
        return InterpolationFailure(
            error=exc.kind,
            message=exc.message,
            query_x=query_x,
            trace=exc.trace,
        )

    plot_points = []
    if config.include_plot:
        plot_points = sample_curve(points, query_x, traced.value, config)

    return InterpolationResult(
        interpolated_value=traced.value,
        query_x=query_x,
        term_displays=traced.term_displays,
        trace=traced.trace,
        plot_points=plot_points,
    )
