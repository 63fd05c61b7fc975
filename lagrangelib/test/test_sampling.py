"""Tests for plot-point sampling."""

import pytest

from lagrangelib.config import InterpolationConfig
from lagrangelib.plotting import sample_curve, sample_grid
from lagrangelib.schema import Sample

WORKED = [Sample(0.0, 1.0), Sample(1.0, 3.0), Sample(2.0, 2.0)]


def _near(points, x, tol=1e-9):
    return [p for p in points if abs(p.x - x) < tol]


def test_grid_spans_padded_domain():
    points = sample_grid(WORKED)
    assert len(points) == 101
    assert points[0].x == pytest.approx(-0.4)
    assert points[-1].x == pytest.approx(2.4)
    assert all(p.original is None and p.target is None for p in points)


def test_zero_range_uses_unit_padding():
    points = sample_grid([Sample(3.0, 7.0)])
    assert points[0].x == pytest.approx(2.0)
    assert points[-1].x == pytest.approx(4.0)
    assert all(p.interpolated == 7.0 for p in points)


def test_curve_covers_every_sample():
    points = sample_curve(WORKED, 1.5, 2.875)
    for sample in WORKED:
        matches = _near(points, sample.x)
        assert len(matches) == 1
        assert matches[0].original == sample.y
        assert matches[0].interpolated == pytest.approx(sample.y, abs=1e-9)


def test_curve_sorted_ascending():
    points = sample_curve(WORKED, 1.5, 2.875)
    xs = [p.x for p in points]
    assert xs == sorted(xs)


def test_target_is_reported_value():
    reported = 2.875000000001
    points = sample_curve(WORKED, 1.5, reported)
    targets = [p for p in points if p.target is not None]
    assert len(targets) == 1
    assert targets[0].x == pytest.approx(1.5, abs=1e-9)
    assert targets[0].target == reported
    assert targets[0].interpolated == pytest.approx(2.875)


def test_target_merges_with_existing_sample_point():
    points = sample_curve([Sample(3.0, 7.0)], 3.0, 7.0)
    assert len(points) == 101
    (point,) = _near(points, 3.0)
    assert point.original == 7.0
    assert point.interpolated == 7.0
    assert point.target == 7.0


def test_query_outside_domain_is_appended():
    points = sample_curve(WORKED, 10.0, -124.0)
    assert points[-1].x == 10.0
    assert points[-1].target == -124.0


def test_custom_resolution_and_padding():
    config = InterpolationConfig(plot_intervals=4, padding_ratio=0.0)
    points = sample_grid([Sample(0.0, 0.0), Sample(4.0, 4.0)], config)
    assert [p.x for p in points] == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0])


def test_empty_samples_give_no_points():
    assert sample_curve([], 0.0, 0.0) == []
