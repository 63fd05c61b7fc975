"""Error types raised while interpolating."""

from __future__ import annotations

from typing import List, Optional

from lagrangelib.schema.enums import ValidationErrorKind
from lagrangelib.schema.results import BasisTerm


class InterpolationError(ValueError):
    """Base class for input-shape failures of an interpolation call.

    ``trace`` holds any basis terms recorded before the failure was detected.
    """

    kind: ValidationErrorKind
    default_message = "Interpolation failed."

    def __init__(self, message: Optional[str] = None, trace: Optional[List[BasisTerm]] = None):
        super().__init__(message or self.default_message)
        self.trace = list(trace or [])

    @property
    def message(self) -> str:
        return self.args[0]


class EmptyInputError(InterpolationError):
    """Raised when the sample set has zero elements."""

    kind = ValidationErrorKind.EMPTY_INPUT
    default_message = "At least one data point is required."


class DuplicateXError(InterpolationError):
    """Raised when two or more samples share an x-coordinate."""

    kind = ValidationErrorKind.DUPLICATE_X
    default_message = "All X values in data points must be unique."


class NumericInstabilityError(InterpolationError):
    """Raised when the summed value is NaN despite validated input.

    Carries the full trace so callers can see which term produced the NaN.
    """

    kind = ValidationErrorKind.NUMERIC_INSTABILITY
    default_message = "Calculation resulted in NaN. Check input values."


ZERO_DENOMINATOR_MESSAGE = (
    "Division by zero in basis polynomial. X values might be too close or identical."
)
