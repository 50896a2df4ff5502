import pathlib
import sys
import unittest
from dataclasses import replace

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from agritech.config.channels import (  # noqa: E402
    CHANNEL_PRESETS,
    ChannelConfig,
    HistoryProfile,
    InvalidConfiguration,
    preset,
)


class ChannelConfigTest(unittest.TestCase):
    def test_presets_are_valid(self):
        for name, cfg in CHANNEL_PRESETS.items():
            self.assertEqual(cfg.name, name)
            self.assertIs(cfg.validate(), cfg)
            self.assertEqual(cfg.tick_interval_ms, 5000)

    def test_soil_preset_matches_screen(self):
        soil = preset("soil_humidity")
        self.assertEqual(soil.capacity, 24)
        self.assertEqual((soil.lower_bound, soil.upper_bound), (5.0, 95.0))
        self.assertEqual(soil.mean, 50.0)
        self.assertEqual(soil.max_labels, 6)
        self.assertEqual(soil.animation_duration_ms, 700)
        self.assertIsInstance(soil.history, HistoryProfile)

    def test_mean_defaults_to_midpoint(self):
        self.assertEqual(preset("light").mean, 450.0)

    def test_gauge_full_scale_falls_back_to_upper_bound(self):
        self.assertEqual(preset("light").gauge_full_scale, 600.0)
        self.assertEqual(preset("soil_humidity").gauge_full_scale, 100.0)

    def test_unknown_preset(self):
        with self.assertRaises(ValueError):
            preset("co2")

    def test_validation_rejects_bad_records(self):
        light = preset("light")
        bad = [
            {"capacity": 0},
            {"lower_bound": 600.0},
            {"upper_bound": 100.0},
            {"model": "brownian"},
            {"easing": "bounce"},
            {"reversion_rate": 1.5},
            {"noise_amplitude": -1.0},
            {"tick_interval_ms": 0},
            {"animation_duration_ms": 0},
            {"max_labels": 0},
            {"gauge_max": 0.0},
            {"history": HistoryProfile(period=0.0)},
        ]
        for changes in bad:
            with self.subTest(changes=changes):
                with self.assertRaises(InvalidConfiguration):
                    replace(light, **changes).validate()

    def test_invalid_configuration_is_value_error(self):
        self.assertTrue(issubclass(InvalidConfiguration, ValueError))

    def test_from_mapping_overlays_preset(self):
        cfg = ChannelConfig.from_mapping(
            "light",
            {"capacity": 12, "upperBound": 800, "maxLabels": 4, "model": "Mean-Reverting"},
            base=preset("light"),
        )
        self.assertEqual(cfg.capacity, 12)
        self.assertEqual(cfg.upper_bound, 800.0)
        self.assertEqual(cfg.max_labels, 4)
        self.assertEqual(cfg.model, "mean_reverting")
        self.assertEqual(cfg.lower_bound, 300.0)

    def test_from_mapping_requires_bounds_without_preset(self):
        with self.assertRaises(InvalidConfiguration):
            ChannelConfig.from_mapping("co2", {"capacity": 10})

    def test_from_mapping_new_channel(self):
        cfg = ChannelConfig.from_mapping(
            "co2",
            {"capacity": 10, "lower_bound": 400, "upper_bound": 2000, "history": True},
        )
        self.assertEqual(cfg.name, "co2")
        self.assertEqual(cfg.history, HistoryProfile())

    def test_from_mapping_rejects_garbage(self):
        with self.assertRaises(InvalidConfiguration):
            ChannelConfig.from_mapping("light", {"capacity": "lots"}, base=preset("light"))
        with self.assertRaises(InvalidConfiguration):
            ChannelConfig.from_mapping("light", {"history": "hourly"}, base=preset("light"))

    def test_mapping_round_trip_preserves_preset(self):
        soil = preset("soil_humidity")
        again = ChannelConfig.from_mapping("soil_humidity", soil.to_mapping())
        self.assertEqual(again, soil)


if __name__ == "__main__":
    unittest.main()
