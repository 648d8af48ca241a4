"""Numeric helpers shared by the geo and rendering contexts."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding toward +infinity.

    Python's built-in ``round`` uses banker's rounding, which would shift
    pixel positions that land exactly on .5 in alternating directions.
    """
    return int(math.floor(value + 0.5))
