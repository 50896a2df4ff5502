"""Small numeric helpers shared by the generator, reducer, and animator."""

from __future__ import annotations

import math


def clamp(value: float, lower: float, upper: float) -> float:
    """Return ``value`` limited to ``[lower, upper]``."""
    return max(lower, min(upper, value))


def round_half_up(value: float) -> float:
    """
    Round to the nearest integer with ties going up (``2.5 -> 3``, ``-2.5 -> -2``).

    Python's :func:`round` uses banker's rounding, which would bias the
    displayed readings.
    """
    return float(math.floor(value + 0.5))


def format_reading(value: float, unit: str = "") -> str:
    """Whole-number display text for a reading (``62.5 -> "63"``), rounded half-up."""
    return f"{int(round_half_up(value))}{unit}"
