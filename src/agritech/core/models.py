"""Shared immutable records passed from the engine to the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Sample:
    timestamp: float
    value: float


@dataclass(frozen=True, slots=True)
class DerivedStats:
    """Summary numbers of one window; all zero for an empty window."""

    min: float = 0.0
    max: float = 0.0
    average: float = 0.0
    current: float = 0.0


EMPTY_STATS = DerivedStats()


@dataclass(frozen=True, slots=True)
class Snapshot:
    """
    Rendering-ready view of one channel at one instant.

    ``series`` is most-recent-last and never longer than the window capacity;
    ``labels`` is a stride-thinned set of time labels for the chart axis.
    """

    channel: str
    stats: DerivedStats
    series: tuple[float, ...]
    labels: tuple[str, ...]
    gauge_value: float
    timestamp: Optional[float] = None
    tick_count: int = 0
