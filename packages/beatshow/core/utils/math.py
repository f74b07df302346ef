"""Integer math helpers matching the map format's 32-bit arithmetic."""

from __future__ import annotations

import math


def trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero.

    Python's ``//`` floors, which differs from the wire format's semantics for
    negative operands.

    Args:
        a: Dividend
        b: Divisor (must be non-zero)

    Returns:
        Quotient truncated toward zero

    Example:
        >>> trunc_div(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def trunc_rem(a: int, b: int) -> int:
    """Remainder paired with ``trunc_div`` (takes the sign of the dividend)."""
    return a - b * trunc_div(a, b)


def trunc_to_int(x: float) -> int:
    """Convert a float to int, truncating toward zero."""
    return int(math.trunc(x))
