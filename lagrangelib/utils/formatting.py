"""String formatting for symbolic derivations.

Numbers are printed the way the presentation layer prints them: shortest
round-trip digits, plain notation for 1e-6 <= |v| < 1e21 and exponent
notation outside that range (``1e-7``, ``1e+21``).
"""

from __future__ import annotations

from typing import Iterable, Tuple

import math

# Magnitudes at or beyond this are printed in exponent notation.
_PLAIN_LIMIT = 21


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _shortest_digits(value: float) -> Tuple[str, int]:
    """Significant digits of ``abs(value)`` and the decimal point position.

    ``value == 0.<digits> * 10**point``.
    """
    mantissa, _, exp = repr(abs(value)).partition("e")
    whole, _, frac = mantissa.partition(".")
    raw = whole + frac
    stripped = raw.lstrip("0")
    point = len(whole) + int(exp or 0) - (len(raw) - len(stripped))
    return stripped.rstrip("0"), point


def format_number(value: float) -> str:
    """Shortest round-trip text for ``value``; ``2.0`` prints as ``2``, ``1e-07`` as ``1e-7``."""
    value = float(value)
    if not math.isfinite(value):
        return _non_finite(value)
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(value)
    k = len(digits)
    if k <= point <= _PLAIN_LIMIT:
        return sign + digits + "0" * (point - k)
    if 0 < point <= _PLAIN_LIMIT:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    exponent = point - 1
    exp_text = f"e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    if k == 1:
        return sign + digits + exp_text
    return f"{sign}{digits[0]}.{digits[1:]}{exp_text}"


def format_fixed(value: float, decimals: int) -> str:
    """Fixed-point text with ``decimals`` places.

    Small negatives keep their sign (``-0.0000``); negative zero itself does not.
    """
    value = float(value)
    if not math.isfinite(value):
        return _non_finite(value)
    if abs(value) >= 10 ** _PLAIN_LIMIT:
        return format_number(value)
    return f"{value + 0.0:.{decimals}f}"


def join_factors(factors: Iterable[str], separator: str = "", empty: str = "1") -> str:
    """Join factor strings, returning ``empty`` for an empty product."""
    return separator.join(factors) or empty


def difference_factor(left: str, right: float) -> str:
    """``(left - right)`` with ``right`` printed via :func:`format_number`."""
    return f"({left} - {format_number(right)})"
