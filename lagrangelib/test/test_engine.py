"""End-to-end tests for ``lagrangelib.compute``."""

import math

import numpy as np
import pandas as pd
import pytest

from lagrangelib import (
    InterpolationConfig,
    InterpolationFailure,
    InterpolationResult,
    Sample,
    ValidationErrorKind,
    compute,
)

WORKED = [(0, 1), (1, 3), (2, 2)]


def test_worked_example_result():
    result = compute(WORKED, 1.5)
    assert isinstance(result, InterpolationResult)
    assert result.ok
    assert result.interpolated_value == 2.875
    assert result.query_x == 1.5
    assert len(result.trace) == 3
    assert result.polynomial_display == (
        "0.5000 * (x - 1)(x - 2) + -3.0000 * (x - 0)(x - 2) + 1.0000 * (x - 0)(x - 1)"
    )


def test_target_consistency():
    result = compute(WORKED, 1.5)
    point = result.target_point()
    assert point is not None
    assert point.target == result.interpolated_value


def test_plot_covers_samples_and_is_sorted():
    result = compute([(-3.0, 2.0), (0.25, -1.0), (5.0, 4.0), (7.5, 0.0)], 1.0)
    xs = [p.x for p in result.plot_points]
    assert xs == sorted(xs)
    for x, y in [(-3.0, 2.0), (0.25, -1.0), (5.0, 4.0), (7.5, 0.0)]:
        assert any(abs(p.x - x) < 1e-9 and p.original == y for p in result.plot_points)


def test_accepts_mappings_and_samples():
    mixed = [{"x": 0, "y": 1}, Sample(1.0, 3.0), np.array([2.0, 2.0])]
    assert compute(mixed, 1.5).interpolated_value == 2.875


def test_single_sample_constant():
    result = compute([(4.0, -2.0)], 123.0)
    assert result.interpolated_value == -2.0
    assert result.term_displays == ["-2.0000"]


def test_empty_input_failure():
    result = compute([], 1.0)
    assert isinstance(result, InterpolationFailure)
    assert not result.ok
    assert result.error is ValidationErrorKind.EMPTY_INPUT
    assert result.message == "At least one data point is required."


def test_duplicate_x_failure():
    result = compute([(1.0, 2.0), (1.0, 3.0)], 0.0)
    assert isinstance(result, InterpolationFailure)
    assert result.error is ValidationErrorKind.DUPLICATE_X


def test_numeric_instability_failure():
    result = compute([(0.0, math.inf), (1.0, -math.inf)], 0.5)
    assert isinstance(result, InterpolationFailure)
    assert result.error is ValidationErrorKind.NUMERIC_INSTABILITY


def test_numeric_instability_payload_keeps_steps():
    payload = compute([(0.0, math.inf), (1.0, -math.inf)], 0.5).to_dict()
    assert payload["interpolatedValue"] is None
    assert payload["error"] == "Calculation resulted in NaN. Check input values."
    steps = payload["calculationSteps"]
    assert len(steps) == 2
    assert [step["termIndex"] for step in steps] == [0, 1]
    assert steps[0]["termValueAtX"] == math.inf
    assert steps[1]["basisDenominatorValue"] == 1.0


def test_shape_failures_have_no_steps():
    assert compute([], 1.0).trace == []
    assert compute([(1.0, 2.0), (1.0, 3.0)], 0.0).to_dict()["calculationSteps"] == []


def test_non_numeric_input_propagates():
    with pytest.raises(ValueError):
        compute([("a", 1.0)], 0.0)


def test_plot_can_be_disabled():
    result = compute(WORKED, 1.5, InterpolationConfig(include_plot=False))
    assert result.plot_points == []
    assert result.target_point() is None
    assert result.interpolated_value == 2.875


def test_success_payload():
    payload = compute(WORKED, 1.5).to_dict()
    assert payload["interpolatedValue"] == 2.875
    assert payload["interpolationPoint"] == 1.5
    assert payload["polynomialTermsDisplay"][1] == "-3.0000 * (x - 0)(x - 2)"
    step = payload["calculationSteps"][1]
    assert step["termIndex"] == 1
    assert step["basisDenominatorValue"] == -1.0
    assert step["basisDenominatorSymbolic"] == "(1 - 0)(1 - 2)"
    assert any(point.get("target") == 2.875 for point in payload["plotData"])


def test_failure_payload():
    payload = compute([], 2.0).to_dict()
    assert payload["interpolatedValue"] is None
    assert payload["error"] == "At least one data point is required."
    assert payload["errorKind"] == "EMPTY_INPUT"


def test_trace_frame():
    frame = compute(WORKED, 1.5).trace_frame()
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.index) == [0, 1, 2]
    assert frame["denominator_value"].tolist() == [2.0, -1.0, 2.0]
    assert frame["term_value"].sum() == pytest.approx(2.875)


def test_plot_frame():
    result = compute(WORKED, 1.5)
    frame = result.plot_frame()
    assert list(frame.columns) == ["x", "original", "interpolated", "target"]
    assert len(frame) == len(result.plot_points)
    assert frame["x"].is_monotonic_increasing
    assert frame["original"].notna().sum() == 3
    assert frame["target"].notna().sum() == 1
