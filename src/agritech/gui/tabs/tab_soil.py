from __future__ import annotations

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ...core.controller import ChannelController
from ...core.models import Snapshot
from ..widgets import CircularGauge, StatBox
from .base import DashboardScreen, apply_axis_labels

OPTIMAL_LEVEL = 50.0


class SoilHumidityTab(DashboardScreen):
    """Gauge, min/average/max row, and the 24-hour soil humidity chart."""

    def __init__(
        self,
        controller: ChannelController,
        *,
        render_fps: float,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__({controller.name: controller}, render_fps=render_fps, parent=parent)
        self._controller = controller
        cfg = controller.config

        layout = QVBoxLayout(self)
        title = QLabel(cfg.label or cfg.name)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 20px; font-weight: 600;")
        layout.addWidget(title)

        self._gauge = CircularGauge(full_scale=cfg.gauge_full_scale, unit=cfg.unit, caption="current")
        layout.addWidget(self._gauge, stretch=2)

        self._stats = StatBox(unit=cfg.unit)
        layout.addWidget(self._stats)

        self._plot = pg.PlotWidget(title="Last 24 hours")
        self._plot.showGrid(x=False, y=True, alpha=0.2)
        self._plot.setYRange(cfg.lower_bound, cfg.upper_bound)
        self._plot.addLegend()
        self._curve = self._plot.plot(
            [],
            [],
            pen=pg.mkPen("#81d8e9", width=2),
            symbol="o",
            symbolSize=6,
            name="Measured humidity",
        )
        optimal = pg.InfiniteLine(
            pos=OPTIMAL_LEVEL,
            angle=0,
            pen=pg.mkPen("#9bd7b9", style=Qt.DashLine),
        )
        self._plot.addItem(optimal)
        layout.addWidget(self._plot, stretch=3)

    def apply_snapshot(self, name: str, snapshot: Snapshot) -> None:
        self._curve.setData(list(range(len(snapshot.series))), list(snapshot.series))
        apply_axis_labels(self._plot, snapshot, self._controller.config.max_labels)
        self._stats.setStats(snapshot.stats)

    def render_frame(self, now: float) -> None:
        self._gauge.setValue(self._controller.gauge_value(now))
