"""Main window for the Agritech dashboard."""

from __future__ import annotations

import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QTabWidget, QVBoxLayout, QWidget

from ..core.dashboard import Dashboard
from .tabs import AirTab, DashboardScreen, GaugeTab, LightTab, SoilHumidityTab

AIR_CHANNELS = ("air_humidity", "air_temperature")


class MainWindow(QMainWindow):
    """One tab per screen; disposes the dashboard when closed."""

    def __init__(self, dashboard: Dashboard) -> None:
        super().__init__()
        self.setWindowTitle("Agritech")

        self._dashboard = dashboard
        self._tabs = QTabWidget()
        self._screens: list[DashboardScreen] = []
        self._logger = logging.getLogger(__name__)

        self._build_tabs()

    @property
    def screens(self) -> list[DashboardScreen]:
        return list(self._screens)

    def start(self) -> None:
        for screen in self._screens:
            screen.start()

    def closeEvent(self, event: QCloseEvent) -> None:
        for screen in self._screens:
            screen.stop()
        self._dashboard.dispose()
        super().closeEvent(event)

    def _build_tabs(self) -> None:
        """Create a tab for every screen whose channels are configured."""
        render_fps = self._dashboard.config.render_fps
        dashboard = self._dashboard

        if "soil_humidity" in dashboard:
            self._add_screen(
                SoilHumidityTab(dashboard["soil_humidity"], render_fps=render_fps),
                self.tr("Soil humidity"),
            )

        air = {name: dashboard[name] for name in AIR_CHANNELS if name in dashboard}
        if air:
            self._add_screen(AirTab(air, render_fps=render_fps), self.tr("Air"))

        if "light" in dashboard:
            self._add_screen(LightTab(dashboard["light"], render_fps=render_fps), self.tr("Light"))

        known = {"soil_humidity", "light", *AIR_CHANNELS}
        for name in dashboard:
            if name in known:
                continue
            self._add_screen(
                GaugeTab(dashboard[name], render_fps=render_fps),
                dashboard[name].config.label or name,
            )

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.addWidget(self._tabs)
        self.setCentralWidget(container)
        self._logger.info("Built %d dashboard tabs", len(self._screens))

    def _add_screen(self, screen: DashboardScreen, title: str) -> None:
        self._screens.append(screen)
        self._tabs.addTab(screen, title)
