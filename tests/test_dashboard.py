from dataclasses import replace
from datetime import datetime

from agritech.config import CHANNEL_NAMES, DashboardConfig, preset
from agritech.core.controller import ControllerState
from agritech.core.dashboard import build_dashboard

NOW = datetime(2024, 5, 1, 9, 30, 0).timestamp()


def test_builds_one_controller_per_channel() -> None:
    dashboard = build_dashboard(DashboardConfig(seed=5), now=NOW)
    assert tuple(dashboard) == CHANNEL_NAMES
    snapshots = dashboard.snapshots()
    assert set(snapshots) == set(CHANNEL_NAMES)
    assert len(snapshots["soil_humidity"].series) == 24
    assert snapshots["light"].series[-1] == 440.0


def test_same_seed_gives_same_simulation() -> None:
    def run() -> dict[str, tuple[float, ...]]:
        dashboard = build_dashboard(DashboardConfig(seed=42), now=NOW)
        for step in range(1, 6):
            dashboard.tick_all(NOW + step * 5.0)
        return {name: snap.series for name, snap in dashboard.snapshots().items()}

    assert run() == run()


def test_channels_are_independent() -> None:
    dashboard = build_dashboard(DashboardConfig(seed=1), now=NOW)
    before = dashboard["light"].get_snapshot()
    dashboard["soil_humidity"].tick(NOW + 5.0)
    assert dashboard["light"].get_snapshot() is before


def test_dispose_stops_every_channel() -> None:
    cfg = DashboardConfig(seed=3, channels={"light": preset("light")})
    dashboard = build_dashboard(cfg, now=NOW)
    dashboard.dispose()
    assert all(dashboard[name].state is ControllerState.DISPOSED for name in dashboard)
    assert dashboard.tick_all(NOW + 5.0) == {}


def test_custom_channel_is_wired() -> None:
    co2 = replace(preset("light"), name="co2", lower_bound=400.0, upper_bound=2000.0, seed_values=(450.0,))
    dashboard = build_dashboard(DashboardConfig(seed=9, channels={"co2": co2}), now=NOW)
    assert "co2" in dashboard
    snap = dashboard["co2"].tick(NOW + 5.0)
    assert all(400.0 <= v <= 2000.0 for v in snap.series)
