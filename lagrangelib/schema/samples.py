"""Input sample type and normalization helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence

import numpy as np


@dataclass(frozen=True)
class Sample:
    """Known point the interpolating polynomial must pass through."""

    x: float
    y: float


def _pick(mapping: Mapping, keys: Iterable[str]):
    for key in keys:
        if key in mapping:
            return mapping[key]
    raise KeyError(f"sample mapping must include one of {tuple(keys)!r}: {mapping!r}")


def to_sample(value: Any) -> Sample:
    """Coerce a ``Sample``, an ``(x, y)`` pair or an ``{"x": .., "y": ..}`` mapping."""
    if isinstance(value, Sample):
        return value
    if isinstance(value, Mapping):
        return Sample(float(_pick(value, ("x", "X"))), float(_pick(value, ("y", "Y"))))
    if isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, (str, bytes)):
        if len(value) != 2:
            raise ValueError(f"sample pair must have exactly two entries: {value!r}")
        return Sample(float(value[0]), float(value[1]))
    raise TypeError(f"Unsupported sample value: {value!r}")


def normalize_samples(samples: Iterable[Any]) -> List[Sample]:
    """Return ``samples`` as a list of :class:`Sample`, preserving order."""
    if samples is None:
        return []
    return [to_sample(value) for value in samples]


def x_values(samples: Sequence[Sample]) -> List[float]:
    return [sample.x for sample in samples]
