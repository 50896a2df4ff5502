import pathlib
import sys
import tempfile
import unittest

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from agritech.config import (  # noqa: E402
    CHANNEL_NAMES,
    DashboardConfig,
    InvalidConfiguration,
    config_from_mapping,
    load_config,
    save_config,
)


class RuntimeConfigTest(unittest.TestCase):
    def test_defaults_include_every_preset(self):
        cfg = config_from_mapping(None)
        self.assertEqual(tuple(cfg.channels), CHANNEL_NAMES)
        self.assertIsNone(cfg.seed)
        self.assertEqual(cfg.render_fps, 60.0)

    def test_missing_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg = load_config(pathlib.Path(tmpdir) / "absent.yaml")
        self.assertEqual(tuple(cfg.channels), CHANNEL_NAMES)

    def test_load_overrides_and_drops_channels(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "dashboard.yaml"
            path.write_text(
                "seed: 7\n"
                "render_fps: 1000\n"
                "channels:\n"
                "  light:\n"
                "    tickIntervalMs: 1000\n"
                "  air_temperature: false\n"
                "  co2:\n"
                "    capacity: 12\n"
                "    lower_bound: 400\n"
                "    upper_bound: 2000\n"
                "    model: triangular\n"
                "    noise_amplitude: 40\n"
                "unknown_key: ignored\n",
                encoding="utf-8",
            )
            cfg = load_config(path)

        self.assertEqual(cfg.seed, 7)
        self.assertEqual(cfg.render_fps, 240.0)
        self.assertEqual(cfg.channels["light"].tick_interval_ms, 1000)
        self.assertEqual(cfg.channels["light"].capacity, 7)
        self.assertNotIn("air_temperature", cfg.channels)
        self.assertEqual(cfg.channels["co2"].model, "triangular")

    def test_non_mapping_document_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "list.yaml"
            path.write_text("- 1\n- 2\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)

    def test_invalid_channel_surfaces(self):
        with self.assertRaises(InvalidConfiguration):
            config_from_mapping({"channels": {"light": {"capacity": 0}}})

    def test_save_then_load(self):
        cfg = DashboardConfig(seed=3, render_fps=30.0)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "nested" / "dashboard.yaml"
            save_config(path, cfg)
            loaded = load_config(path)
        self.assertEqual(loaded.seed, 3)
        self.assertEqual(loaded.render_fps, 30.0)
        self.assertEqual(loaded.channels, cfg.channels)


if __name__ == "__main__":
    unittest.main()
