"""Curve sampling for charting the interpolating polynomial."""

from __future__ import annotations

from typing import List, Sequence

import logging
import math

from lagrangelib.config import DEFAULT_CONFIG, InterpolationConfig
from lagrangelib.interpolation.lagrange import evaluate_at
from lagrangelib.schema.results import PlotPoint
from lagrangelib.schema.samples import Sample, x_values
from lagrangelib.utils.mathutils import find_close, linear_grid, padded_domain

logger = logging.getLogger(__name__)


def sample_grid(
    samples: Sequence[Sample], config: InterpolationConfig = DEFAULT_CONFIG
) -> List[PlotPoint]:
    """Evaluate the polynomial across the padded sample domain, skipping NaN values."""
    lower, upper = padded_domain(
        x_values(samples), config.padding_ratio, config.zero_range_padding
    )
    points: List[PlotPoint] = []
    dropped = 0
    for x in linear_grid(lower, upper, config.plot_intervals):
        x = float(x)
        value = evaluate_at(samples, x)
        if math.isnan(value):
            dropped += 1
            continue
        points.append(PlotPoint(x=x, interpolated=value))
    if dropped:
        logger.warning("Dropped %s NaN plot samples on [%s, %s]", dropped, lower, upper)
    return points


def _locate(points: List[PlotPoint], x: float, tolerance: float):
    idx = find_close([p.x for p in points], x, tolerance)
    return None if idx is None else points[idx]


def merge_samples(
    points: List[PlotPoint],
    samples: Sequence[Sample],
    config: InterpolationConfig = DEFAULT_CONFIG,
) -> None:
    """Mark each sample on the curve, inserting a point where the grid misses it."""
    for sample in samples:
        existing = _locate(points, sample.x, config.match_tolerance)
        if existing is not None:
            existing.original = sample.y
        else:
            points.append(
                PlotPoint(x=sample.x, original=sample.y, interpolated=evaluate_at(samples, sample.x))
            )


def merge_target(
    points: List[PlotPoint],
    samples: Sequence[Sample],
    query_x: float,
    interpolated_value: float,
    config: InterpolationConfig = DEFAULT_CONFIG,
) -> None:
    """Mark the query point; ``target`` is the traced sum, not a re-evaluation."""
    curve_value = evaluate_at(samples, query_x)
    if math.isnan(curve_value):
        logger.warning("Query point x=%s evaluates to NaN; target not plotted", query_x)
        return
    existing = _locate(points, query_x, config.match_tolerance)
    if existing is not None:
        existing.interpolated = curve_value
        existing.target = interpolated_value
    else:
        points.append(PlotPoint(x=query_x, interpolated=curve_value, target=interpolated_value))


def sample_curve(
    samples: Sequence[Sample],
    query_x: float,
    interpolated_value: float,
    config: InterpolationConfig = DEFAULT_CONFIG,
) -> List[PlotPoint]:
    """
    Build the plot sequence for ``samples`` and the query point.

    Args:
        samples: Validated, non-empty samples
        query_x: Point at which the polynomial was evaluated
        interpolated_value: Traced sum at ``query_x``
        config: Padding, resolution and match tolerance

    Returns:
        Plot points sorted ascending by x
    """
    if len(samples) == 0:
        return []
    points = sample_grid(samples, config)
    merge_samples(points, samples, config)
    merge_target(points, samples, float(query_x), interpolated_value, config)
    points.sort(key=lambda p: p.x)
    logger.debug("Sampled %s plot points for %s samples", len(points), len(samples))
    return points
