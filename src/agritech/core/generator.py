"""Bounded random-walk models producing successive readings for a channel."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Protocol

import numpy as np

from ..config.channels import ChannelConfig, HistoryProfile, InvalidConfiguration
from .models import Sample
from .numeric import clamp, round_half_up


class RandomSource(Protocol):
    """Subset of :class:`numpy.random.Generator` the models draw from."""

    def random(self) -> float:  # pragma: no cover - protocol
        ...

    def uniform(self, low: float, high: float) -> float:  # pragma: no cover - protocol
        ...

    def triangular(self, left: float, mode: float, right: float) -> float:  # pragma: no cover - protocol
        ...


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return the RNG shared by all channels of a dashboard."""
    return np.random.default_rng(seed)


def _mean_reverting(previous: float, cfg: ChannelConfig, rng: RandomSource) -> float:
    drift = (cfg.mean - previous) * cfg.reversion_rate
    half = cfg.noise_amplitude / 2.0
    noise = float(rng.uniform(-half, half))
    return round_half_up(previous + drift + noise)


def _uniform(previous: float, cfg: ChannelConfig, rng: RandomSource) -> float:
    # Fresh draw over the whole range; the previous value is not used.
    span = cfg.upper_bound - cfg.lower_bound
    return float(math.floor(cfg.lower_bound + float(rng.random()) * span))


def _triangular(previous: float, cfg: ChannelConfig, rng: RandomSource) -> float:
    half = cfg.noise_amplitude / 2.0
    if half <= 0.0:
        return round_half_up(previous)
    mode = clamp(previous, cfg.lower_bound, cfg.upper_bound)
    return round_half_up(float(rng.triangular(mode - half, mode, mode + half)))


_MODELS: Dict[str, Callable[[float, ChannelConfig, RandomSource], float]] = {
    "mean_reverting": _mean_reverting,
    "uniform": _uniform,
    "triangular": _triangular,
}


def next_value(previous: float, cfg: ChannelConfig, rng: RandomSource) -> float:
    """
    Draw the reading that follows ``previous`` for channel ``cfg``.

    The result is a whole number inside ``[cfg.lower_bound, cfg.upper_bound]``.
    """
    try:
        model = _MODELS[cfg.model]
    except KeyError:
        raise InvalidConfiguration(f"{cfg.name}: unknown model {cfg.model!r}") from None
    return clamp(model(float(previous), cfg, rng), cfg.lower_bound, cfg.upper_bound)


def _floor_to_hour(timestamp: float) -> float:
    moment = datetime.fromtimestamp(timestamp).replace(minute=0, second=0, microsecond=0)
    return moment.timestamp()


class SampleGenerator:
    """Per-channel wrapper binding a :class:`ChannelConfig` to an RNG."""

    def __init__(self, config: ChannelConfig, rng: RandomSource) -> None:
        self._config = config
        self._rng = rng

    @property
    def config(self) -> ChannelConfig:
        return self._config

    def next(self, previous: float) -> float:
        return next_value(previous, self._config, self._rng)

    def flat_seed(self, values: Iterable[float], now: float) -> List[Sample]:
        """Timestamp ``values`` one tick apart, the last one at ``now``."""
        cfg = self._config
        items = [clamp(float(v), cfg.lower_bound, cfg.upper_bound) for v in values]
        step = cfg.tick_interval_s
        count = len(items)
        return [
            Sample(timestamp=now - (count - 1 - idx) * step, value=value)
            for idx, value in enumerate(items)
        ]

    def history(self, profile: HistoryProfile, now: float) -> List[Sample]:
        """
        Synthesize ``profile.points`` readings ending at the current hour.

        Values follow a slow sinusoid plus uniform jitter, clamped to bounds.
        """
        cfg = self._config
        anchor = _floor_to_hour(now)
        samples: List[Sample] = []
        for offset in range(profile.points - 1, -1, -1):
            wave = math.sin(offset / profile.period) * profile.swing
            jitter = float(self._rng.random()) * profile.jitter
            value = clamp(profile.base + round_half_up(wave + jitter), cfg.lower_bound, cfg.upper_bound)
            samples.append(Sample(timestamp=anchor - offset * profile.step_seconds, value=value))
        return samples

    def seed_samples(self, now: float) -> List[Sample]:
        """Initial window contents: the flat seed if any, else the history profile."""
        cfg = self._config
        if cfg.seed_values:
            return self.flat_seed(cfg.seed_values, now)
        if cfg.history is not None:
            return self.history(cfg.history, now)
        return []


__all__ = ["RandomSource", "SampleGenerator", "make_rng", "next_value"]
