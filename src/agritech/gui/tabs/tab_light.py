from __future__ import annotations

from typing import Tuple

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ...config.channels import ChannelConfig
from ...core.controller import ChannelController
from ...core.models import Snapshot
from ..widgets import CircularGauge
from .base import DashboardScreen, apply_axis_labels


def chart_titles(cfg: ChannelConfig) -> Tuple[str, str]:
    """Plot title and legend entry for a single-channel chart."""
    label = cfg.label or cfg.name
    unit = cfg.unit.strip()
    legend = f"{label} ({unit})" if unit else label
    return f"Recent readings: {label}", legend


class GaugeTab(DashboardScreen):
    """One channel: gauge scaled to the channel's full scale, plus its chart."""

    def __init__(
        self,
        controller: ChannelController,
        *,
        render_fps: float,
        caption: str = "current",
        color: str = "#80dbf5",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__({controller.name: controller}, render_fps=render_fps, parent=parent)
        self._controller = controller
        cfg = controller.config
        plot_title, legend = chart_titles(cfg)

        layout = QVBoxLayout(self)
        title = QLabel(cfg.label or cfg.name)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 20px; font-weight: 600;")
        layout.addWidget(title)

        self._gauge = CircularGauge(
            full_scale=cfg.gauge_full_scale,
            unit=cfg.unit,
            caption=caption,
            color=color,
        )
        layout.addWidget(self._gauge, stretch=2)

        self._plot = pg.PlotWidget(title=plot_title)
        self._plot.addLegend()
        self._curve = self._plot.plot(
            [],
            [],
            pen=pg.mkPen(color, width=2),
            symbol="o",
            symbolSize=6,
            name=legend,
        )
        layout.addWidget(self._plot, stretch=3)

        footer = QLabel(f"Simulated data, refreshed every {cfg.tick_interval_s:g} s.")
        footer.setAlignment(Qt.AlignCenter)
        layout.addWidget(footer)

    def apply_snapshot(self, name: str, snapshot: Snapshot) -> None:
        self._curve.setData(list(range(len(snapshot.series))), list(snapshot.series))
        apply_axis_labels(self._plot, snapshot, self._controller.config.max_labels)

    def render_frame(self, now: float) -> None:
        self._gauge.setValue(self._controller.gauge_value(now))


class LightTab(GaugeTab):
    def __init__(
        self,
        controller: ChannelController,
        *,
        render_fps: float,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(
            controller,
            render_fps=render_fps,
            caption="intensity",
            color="#ffd166",
            parent=parent,
        )
