"""Chart-axis label thinning."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Callable, List, Sequence

LabelFormatter = Callable[[float], str]


def format_time_label(timestamp: float) -> str:
    """Format a POSIX timestamp as a zero-padded local ``HH:MM``."""
    moment = datetime.fromtimestamp(timestamp)
    return f"{moment.hour:02d}:{moment.minute:02d}"


def label_stride(length: int, max_labels: int) -> int:
    """Distance between kept labels so at most ``max_labels`` remain."""
    if max_labels < 1:
        raise ValueError(f"max_labels must be >= 1, got {max_labels}")
    if length <= 0:
        return 1
    return max(1, math.ceil(length / max_labels))


def sample_labels(
    timestamps: Sequence[float],
    max_labels: int,
    *,
    formatter: LabelFormatter = format_time_label,
) -> List[str]:
    """
    Keep every ``stride``-th timestamp (index 0, stride, 2*stride, ...) as a label.

    Display only: the labels cannot be mapped back onto the value series.
    """
    stride = label_stride(len(timestamps), max_labels)
    return [formatter(ts) for idx, ts in enumerate(timestamps) if idx % stride == 0]


__all__ = ["LabelFormatter", "format_time_label", "label_stride", "sample_labels"]
