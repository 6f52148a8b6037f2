"""Rounding that matches the reported numbers users expect.

Python's built-in ``round`` rounds half to even (``round(2.5) == 2``).
Shares and averages here are always rounded half up, so ``2.5 -> 3`` and
``-2.5 -> -2``.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return int(math.floor(value + 0.5))


def percent_share(part: float, total: float) -> int:
    """Rounded percentage of ``part`` in ``total``; 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)
