"""Telemetry simulation engine: windows, reducers, animators, and controllers.

Nothing here touches Qt. Each channel controller ticks on an externally owned
timer and publishes immutable snapshots that the GUI (or a test harness
advancing synthetic time) reads.
"""

from .animation import AnimatedValue, GaugeAnimator, gauge_fraction
from .controller import ChannelController, ControllerState
from .dashboard import Dashboard, build_dashboard
from .generator import SampleGenerator, make_rng, next_value
from .labels import format_time_label, label_stride, sample_labels
from .models import EMPTY_STATS, DerivedStats, Sample, Snapshot
from .rolling_window import RollingWindow
from .stats import reduce_stats, reduce_values
from .ticker import TickerHandle, start_ticker

__all__ = [
    "AnimatedValue",
    "ChannelController",
    "ControllerState",
    "Dashboard",
    "DerivedStats",
    "EMPTY_STATS",
    "GaugeAnimator",
    "RollingWindow",
    "Sample",
    "SampleGenerator",
    "Snapshot",
    "TickerHandle",
    "build_dashboard",
    "format_time_label",
    "gauge_fraction",
    "label_stride",
    "make_rng",
    "next_value",
    "reduce_stats",
    "reduce_values",
    "sample_labels",
    "start_ticker",
]
