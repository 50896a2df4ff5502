"""Summary statistics over a rolling window."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .models import EMPTY_STATS, DerivedStats, Sample
from .numeric import round_half_up


def reduce_values(values: Sequence[float]) -> DerivedStats:
    """
    Compute min/max/average/current over ``values`` (oldest first).

    ``average`` is the arithmetic mean rounded half-up to a whole number.
    An empty sequence yields :data:`EMPTY_STATS` (all zeros).
    """
    if len(values) == 0:
        return EMPTY_STATS
    arr = np.asarray(values, dtype=np.float64)
    return DerivedStats(
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        average=round_half_up(float(np.mean(arr))),
        current=float(arr[-1]),
    )


def reduce_stats(samples: Sequence[Sample]) -> DerivedStats:
    """Reduce a window snapshot of :class:`Sample` objects."""
    return reduce_values([sample.value for sample in samples])


__all__ = ["reduce_stats", "reduce_values"]
