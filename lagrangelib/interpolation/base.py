"""
Base classes for polynomial interpolation methods.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

import numpy as np

from lagrangelib.errors import DuplicateXError, EmptyInputError
from lagrangelib.schema.samples import Sample


class Interpolator(ABC):
    """Base class for interpolation through a fixed sample set."""

    def __init__(self, xs: Sequence[float], ys: Sequence[float]):
        """
        Initialize interpolator.

        Args:
            xs: Sample abscissae, pairwise distinct
            ys: Sample ordinates
        """
        if len(xs) != len(ys):
            raise ValueError("xs and ys must have same length")
        if len(xs) == 0:
            raise EmptyInputError()

        # Input order is kept; the basis index is the sample position
        self.xs = np.asarray(xs, dtype=float)
        self.ys = np.asarray(ys, dtype=float)

        # Check for duplicates
        if len(np.unique(self.xs)) != len(self.xs):
            raise DuplicateXError()

    @classmethod
    def from_samples(cls, samples: Sequence[Sample]) -> "Interpolator":
        return cls([s.x for s in samples], [s.y for s in samples])

    @property
    def samples(self) -> List[Sample]:
        return [Sample(float(x), float(y)) for x, y in zip(self.xs, self.ys, strict=True)]

    @abstractmethod
    def interpolate(self, x: float) -> float:
        """Interpolate value at x."""
        pass

    def interpolate_many(self, xs: Sequence[float]) -> List[float]:
        """Interpolate values at multiple points."""
        return [self.interpolate(x) for x in xs]

    def __call__(self, x: float) -> float:
        return self.interpolate(x)
