from __future__ import annotations

from typing import Mapping

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from ...core.controller import ChannelController
from ...core.models import Snapshot
from ..widgets import ValueCard
from .base import DashboardScreen, apply_axis_labels

_CURVE_COLORS = ("#74c69d", "#ffb703", "#80dbf5", "#e76f51")


class AirTab(DashboardScreen):
    """Headline cards and one combined chart for the air channels."""

    def __init__(
        self,
        controllers: Mapping[str, ChannelController],
        *,
        render_fps: float,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(controllers, render_fps=render_fps, parent=parent)

        layout = QVBoxLayout(self)
        title = QLabel("Air humidity & temperature")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 20px; font-weight: 600;")
        layout.addWidget(title)

        cards_row = QHBoxLayout()
        self._cards: dict[str, ValueCard] = {}
        for name, controller in self._controllers.items():
            cfg = controller.config
            card = ValueCard(cfg.label or name, unit=cfg.unit)
            cards_row.addWidget(card)
            self._cards[name] = card
        layout.addLayout(cards_row)

        self._plot = pg.PlotWidget(title="Recent evolution")
        self._plot.addLegend()
        self._curves: dict[str, pg.PlotDataItem] = {}
        for idx, (name, controller) in enumerate(self._controllers.items()):
            cfg = controller.config
            color = _CURVE_COLORS[idx % len(_CURVE_COLORS)]
            unit = cfg.unit.strip()
            self._curves[name] = self._plot.plot(
                [],
                [],
                pen=pg.mkPen(color, width=2),
                symbol="o",
                symbolSize=6,
                name=f"{cfg.label or name} ({unit})" if unit else (cfg.label or name),
            )
        layout.addWidget(self._plot, stretch=3)

    def apply_snapshot(self, name: str, snapshot: Snapshot) -> None:
        self._cards[name].setValue(snapshot.stats.current)
        self._curves[name].setData(list(range(len(snapshot.series))), list(snapshot.series))
        # The axis follows the first channel; the air channels tick together.
        first = next(iter(self._controllers))
        if name == first:
            apply_axis_labels(self._plot, snapshot, self._controllers[name].config.max_labels)
