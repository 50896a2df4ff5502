from dataclasses import replace

import pytest

pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("pyqtgraph")

from agritech.config import ChannelConfig, preset  # noqa: E402
from agritech.gui.tabs.tab_light import chart_titles  # noqa: E402


def test_custom_channel_titles_come_from_its_label() -> None:
    cfg = ChannelConfig(
        name="co2",
        capacity=10,
        lower_bound=400.0,
        upper_bound=2000.0,
        unit=" ppm",
        label="CO2",
    )
    plot_title, legend = chart_titles(cfg)
    assert plot_title == "Recent readings: CO2"
    assert legend == "CO2 (ppm)"
    assert "light" not in plot_title.lower()


def test_titles_fall_back_to_channel_name() -> None:
    cfg = ChannelConfig(name="leaf_wetness", capacity=5, lower_bound=0.0, upper_bound=1.0)
    assert chart_titles(cfg) == ("Recent readings: leaf_wetness", "leaf_wetness")


def test_light_preset_titles() -> None:
    plot_title, legend = chart_titles(replace(preset("light")))
    assert plot_title == "Recent readings: Light intensity"
    assert legend == "Light intensity (lux)"
