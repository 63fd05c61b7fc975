"""Plot-ready sampling of the interpolating polynomial."""

from .sampling import merge_samples, merge_target, sample_curve, sample_grid

__all__ = ["sample_curve", "sample_grid", "merge_samples", "merge_target"]
