from __future__ import annotations

import logging
import time
from functools import partial
from typing import Mapping, Sequence

import pyqtgraph as pg
from PySide6.QtCore import QTimer, Qt, Slot
from PySide6.QtWidgets import QWidget

from ...core.controller import ChannelController
from ...core.labels import label_stride
from ...core.models import Snapshot

logger = logging.getLogger(__name__)


def apply_axis_labels(plot: pg.PlotWidget, snapshot: Snapshot, max_labels: int) -> None:
    """Place the thinned labels on the bottom axis at their series positions."""
    stride = label_stride(len(snapshot.series), max_labels)
    positions = range(0, len(snapshot.series), stride)
    plot.getAxis("bottom").setTicks([list(zip(positions, snapshot.labels))])


class DashboardScreen(QWidget):
    """
    Base for one dashboard tab.

    Owns a tick ``QTimer`` per channel (at the channel's tick interval) and a
    single render ``QTimer`` polling gauge animators at ``render_fps``.
    Subclasses implement :meth:`apply_snapshot` and :meth:`render_frame`.
    """

    def __init__(
        self,
        controllers: Mapping[str, ChannelController],
        *,
        render_fps: float,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controllers = dict(controllers)
        self._tick_timers: dict[str, QTimer] = {}
        for name, controller in self._controllers.items():
            timer = QTimer(self)
            timer.setInterval(controller.config.tick_interval_ms)
            timer.timeout.connect(partial(self._on_tick, name))
            controller.on_dispose(timer.stop)
            self._tick_timers[name] = timer

        self._render_timer = QTimer(self)
        self._render_timer.setTimerType(Qt.PreciseTimer)
        self._render_timer.setInterval(max(1, int(round(1000.0 / max(1.0, render_fps)))))
        self._render_timer.timeout.connect(self._on_render)

    @property
    def channel_names(self) -> Sequence[str]:
        return tuple(self._controllers)

    def start(self) -> None:
        for name, controller in self._controllers.items():
            self.apply_snapshot(name, controller.get_snapshot())
            self._tick_timers[name].start()
        self._render_timer.start()

    def stop(self) -> None:
        for timer in self._tick_timers.values():
            timer.stop()
        self._render_timer.stop()

    def _on_tick(self, name: str) -> None:
        controller = self._controllers[name]
        if controller.disposed:
            self._tick_timers[name].stop()
            return
        snapshot = controller.tick(time.time())
        self.apply_snapshot(name, snapshot)

    @Slot()
    def _on_render(self) -> None:
        self.render_frame(time.time())

    # ------------------------------------------------------------- overrides
    def apply_snapshot(self, name: str, snapshot: Snapshot) -> None:
        raise NotImplementedError

    def render_frame(self, now: float) -> None:
        """Called every render tick; default does nothing."""
