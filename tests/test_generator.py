from dataclasses import replace
from datetime import datetime

import pytest

from agritech.config import InvalidConfiguration, preset
from agritech.core.generator import SampleGenerator, make_rng, next_value
from agritech.core.numeric import round_half_up

from .rng_stubs import ConstantRng, ScriptedRng


def test_round_half_up_differs_from_bankers_rounding() -> None:
    assert round_half_up(2.5) == 3.0
    assert round_half_up(3.5) == 4.0
    assert round_half_up(-2.5) == -2.0
    assert round_half_up(2.49) == 2.0


def test_mean_reverting_step_is_exact_with_scripted_draws() -> None:
    soil = preset("soil_humidity")
    # noise = -4 + 8 * draw; drift = (50 - prev) * 0.05
    rng = ScriptedRng([1.0, 0.5, 0.0])
    assert next_value(50.0, soil, rng) == 54.0  # 50 + 0 + 4
    assert next_value(70.0, soil, rng) == 69.0  # 70 - 1 + 0
    assert next_value(30.0, soil, rng) == 27.0  # 30 + 1 - 4


def test_mean_reverting_clamps_to_bounds() -> None:
    soil = preset("soil_humidity")
    assert next_value(94.0, soil, ConstantRng(1.0)) == 95.0
    assert next_value(6.0, soil, ConstantRng(0.0)) == 5.0


def test_uniform_redraw_ignores_previous_value() -> None:
    light = preset("light")
    assert next_value(440.0, light, ConstantRng(0.5)) == 450.0
    assert next_value(300.0, light, ConstantRng(0.5)) == 450.0
    assert next_value(300.0, light, ConstantRng(0.0)) == 300.0
    assert next_value(300.0, light, ConstantRng(0.9999)) == 599.0


def test_triangular_model_stays_near_previous() -> None:
    cfg = replace(preset("soil_humidity"), model="triangular", noise_amplitude=10.0)
    assert next_value(50.0, cfg, ConstantRng(0.5)) == 50.0
    low = next_value(50.0, cfg, ConstantRng(0.0))
    high = next_value(50.0, cfg, ConstantRng(0.999999))
    assert low == 45.0
    assert high == 55.0


def test_triangular_without_amplitude_is_flat() -> None:
    cfg = replace(preset("soil_humidity"), model="triangular", noise_amplitude=0.0)
    rng = ConstantRng(0.3)
    assert next_value(42.4, cfg, rng) == 42.0
    assert rng.calls == 0


def test_unknown_model_raises() -> None:
    cfg = replace(preset("light"), model="brownian")
    with pytest.raises(InvalidConfiguration):
        next_value(400.0, cfg, ConstantRng(0.5))


@pytest.mark.parametrize("name", ["soil_humidity", "air_humidity", "air_temperature", "light"])
def test_values_stay_in_bounds_over_many_steps(name: str) -> None:
    cfg = preset(name)
    rng = make_rng(1234)
    value = cfg.mean
    for _ in range(2000):
        value = next_value(value, cfg, rng)
        assert cfg.lower_bound <= value <= cfg.upper_bound
        assert value == int(value)


def test_seeded_rng_is_reproducible() -> None:
    cfg = preset("soil_humidity")

    def run(seed: int) -> list[float]:
        rng = make_rng(seed)
        value, out = 50.0, []
        for _ in range(20):
            value = next_value(value, cfg, rng)
            out.append(value)
        return out

    assert run(7) == run(7)


def test_flat_seed_is_spaced_one_tick_apart() -> None:
    light = preset("light")
    gen = SampleGenerator(light, ConstantRng(0.5))
    samples = gen.seed_samples(now=1_000.0)
    assert [s.value for s in samples] == list(light.seed_values)
    assert samples[-1].timestamp == 1_000.0
    assert samples[0].timestamp == 1_000.0 - 6 * 5.0


def test_history_seed_is_hourly_and_bounded() -> None:
    soil = preset("soil_humidity")
    gen = SampleGenerator(soil, ConstantRng(0.0))
    now = datetime(2024, 5, 1, 14, 37, 12).timestamp()
    samples = gen.seed_samples(now)

    assert len(samples) == 24
    newest = datetime.fromtimestamp(samples[-1].timestamp)
    assert (newest.hour, newest.minute, newest.second) == (14, 0, 0)
    gaps = {b.timestamp - a.timestamp for a, b in zip(samples, samples[1:])}
    assert gaps == {3600.0}
    # With zero jitter the newest point (offset 0) sits exactly on the base.
    assert samples[-1].value == 40.0
    assert all(soil.lower_bound <= s.value <= soil.upper_bound for s in samples)


def test_no_seed_means_empty_window() -> None:
    cfg = replace(preset("light"), seed_values=(), history=None)
    assert SampleGenerator(cfg, ConstantRng(0.5)).seed_samples(0.0) == []
