"""Shared numeric and formatting helpers."""

from .formatting import difference_factor, format_fixed, format_number, join_factors
from .mathutils import find_close, has_duplicates, linear_grid, padded_domain, product

__all__ = [
    "difference_factor",
    "format_fixed",
    "format_number",
    "join_factors",
    "find_close",
    "has_duplicates",
    "linear_grid",
    "padded_domain",
    "product",
]
