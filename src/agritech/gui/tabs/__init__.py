"""Tab widgets for the Agritech dashboard, one per screen."""

from __future__ import annotations

from .base import DashboardScreen
from .tab_air import AirTab
from .tab_light import GaugeTab, LightTab, chart_titles
from .tab_soil import SoilHumidityTab

__all__ = ["AirTab", "DashboardScreen", "GaugeTab", "LightTab", "SoilHumidityTab", "chart_titles"]
