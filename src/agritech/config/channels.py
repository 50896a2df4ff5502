"""Per-channel simulation presets and validation."""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

DEFAULT_TICK_INTERVAL_MS = 5000

MODELS = ("mean_reverting", "uniform", "triangular")
EASINGS = ("linear", "ease_out", "ease_in_out")

# camelCase keys accepted in YAML next to the canonical snake_case names
_KEY_ALIASES = {
    "lowerBound": "lower_bound",
    "upperBound": "upper_bound",
    "targetMean": "target_mean",
    "reversionRate": "reversion_rate",
    "noiseAmplitude": "noise_amplitude",
    "tickIntervalMs": "tick_interval_ms",
    "animationDurationMs": "animation_duration_ms",
    "maxLabels": "max_labels",
    "seedValues": "seed_values",
    "gaugeMax": "gauge_max",
}


class InvalidConfiguration(ValueError):
    """Raised when a channel configuration cannot drive a controller."""


@dataclass(frozen=True)
class HistoryProfile:
    """
    Synthetic history used to seed a window before the first tick.

    Point ``i`` hours before the anchor gets
    ``base + round(sin(i / period) * swing + U(0, 1) * jitter)``.
    """

    points: int = 24
    step_seconds: float = 3600.0
    base: float = 40.0
    swing: float = 8.0
    period: float = 3.0
    jitter: float = 8.0

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "HistoryProfile":
        defaults = cls()
        try:
            return cls(
                points=int(mapping.get("points", defaults.points)),
                step_seconds=float(mapping.get("step_seconds", defaults.step_seconds)),
                base=float(mapping.get("base", defaults.base)),
                swing=float(mapping.get("swing", defaults.swing)),
                period=float(mapping.get("period", defaults.period)),
                jitter=float(mapping.get("jitter", defaults.jitter)),
            )
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(f"invalid history block: {exc}") from exc

    def to_mapping(self) -> dict:
        return {
            "points": self.points,
            "step_seconds": self.step_seconds,
            "base": self.base,
            "swing": self.swing,
            "period": self.period,
            "jitter": self.jitter,
        }


@dataclass(frozen=True)
class ChannelConfig:
    """
    Static configuration record for one simulated sensor channel.

    ``seed_values`` pre-populates the window with a flat array; when it is empty
    and ``history`` is set, a synthetic history is generated instead.
    ``gauge_max`` is the value drawn as a full gauge (defaults to the upper
    bound).
    """

    name: str
    capacity: int
    lower_bound: float
    upper_bound: float
    model: str = "mean_reverting"
    target_mean: Optional[float] = None
    reversion_rate: float = 0.05
    noise_amplitude: float = 8.0
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    animation_duration_ms: int = 700
    max_labels: int = 6
    easing: str = "ease_out"
    seed_values: Tuple[float, ...] = ()
    history: Optional[HistoryProfile] = None
    gauge_max: Optional[float] = None
    unit: str = ""
    label: str = ""

    @property
    def mean(self) -> float:
        """Mean-reversion target (midpoint of the bounds when unset)."""
        if self.target_mean is not None:
            return float(self.target_mean)
        return (self.lower_bound + self.upper_bound) / 2.0

    @property
    def gauge_full_scale(self) -> float:
        return float(self.gauge_max if self.gauge_max is not None else self.upper_bound)

    @property
    def tick_interval_s(self) -> float:
        return self.tick_interval_ms / 1000.0

    def validate(self) -> "ChannelConfig":
        """Return ``self`` or raise :class:`InvalidConfiguration`."""
        name = self.name or "<unnamed>"
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise InvalidConfiguration(f"{name}: capacity must be an integer")
        if self.capacity <= 0:
            raise InvalidConfiguration(f"{name}: capacity must be positive, got {self.capacity}")
        for attr in ("lower_bound", "upper_bound", "reversion_rate", "noise_amplitude"):
            if not math.isfinite(getattr(self, attr)):
                raise InvalidConfiguration(f"{name}: {attr} must be finite")
        if self.lower_bound >= self.upper_bound:
            raise InvalidConfiguration(
                f"{name}: lower_bound ({self.lower_bound}) must be below upper_bound ({self.upper_bound})"
            )
        if self.model not in MODELS:
            raise InvalidConfiguration(f"{name}: unknown model {self.model!r}")
        if self.easing not in EASINGS:
            raise InvalidConfiguration(f"{name}: unknown easing {self.easing!r}")
        if not 0.0 <= self.reversion_rate <= 1.0:
            raise InvalidConfiguration(f"{name}: reversion_rate must be within [0, 1]")
        if self.noise_amplitude < 0.0:
            raise InvalidConfiguration(f"{name}: noise_amplitude must be >= 0")
        if self.tick_interval_ms <= 0:
            raise InvalidConfiguration(f"{name}: tick_interval_ms must be positive")
        if self.animation_duration_ms <= 0:
            raise InvalidConfiguration(f"{name}: animation_duration_ms must be positive")
        if self.max_labels < 1:
            raise InvalidConfiguration(f"{name}: max_labels must be >= 1")
        if self.gauge_max is not None and self.gauge_max <= 0:
            raise InvalidConfiguration(f"{name}: gauge_max must be positive")
        history = self.history
        if history is not None and (history.points < 0 or history.step_seconds <= 0 or history.period == 0):
            raise InvalidConfiguration(f"{name}: history needs points >= 0, a positive step and a non-zero period")
        return self

    @classmethod
    def from_mapping(
        cls,
        name: str,
        mapping: Mapping[str, Any] | None,
        *,
        base: "ChannelConfig | None" = None,
    ) -> "ChannelConfig":
        """
        Build a channel config from a YAML block, overlaying ``base`` when given.

        Supported shape::

            light:
              capacity: 7
              lower_bound: 300
              upper_bound: 600
              model: uniform
        """
        payload: Dict[str, Any] = {}
        for key, value in (mapping or {}).items():
            payload[_KEY_ALIASES.get(str(key), str(key))] = value

        if base is None:
            missing = [key for key in ("capacity", "lower_bound", "upper_bound") if key not in payload]
            if missing:
                raise InvalidConfiguration(f"{name}: missing required keys {missing}")
            base = cls(name=name, capacity=1, lower_bound=0.0, upper_bound=1.0)

        changes: Dict[str, Any] = {"name": name}
        try:
            for key in ("capacity", "tick_interval_ms", "animation_duration_ms", "max_labels"):
                if key in payload:
                    changes[key] = int(payload[key])
            for key in ("lower_bound", "upper_bound", "reversion_rate", "noise_amplitude"):
                if key in payload:
                    changes[key] = float(payload[key])
            for key in ("target_mean", "gauge_max"):
                if key in payload:
                    changes[key] = None if payload[key] is None else float(payload[key])
            for key in ("model", "easing"):
                if key in payload:
                    changes[key] = str(payload[key]).strip()
            for key in ("unit", "label"):
                if key in payload:
                    changes[key] = "" if payload[key] is None else str(payload[key])
            if "model" in changes:
                changes["model"] = changes["model"].lower().replace("-", "_")
            if "seed_values" in payload:
                changes["seed_values"] = tuple(float(v) for v in payload["seed_values"] or ())
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(f"{name}: {exc}") from exc

        if "history" in payload:
            block = payload["history"]
            if block is None or block is False:
                changes["history"] = None
            elif isinstance(block, Mapping):
                changes["history"] = HistoryProfile.from_mapping(block)
            elif block is True:
                changes["history"] = HistoryProfile()
            else:
                raise InvalidConfiguration(f"{name}: history must be a mapping or a boolean")

        return replace(base, **changes).validate()

    def to_mapping(self) -> dict:
        """Serialize back into a mapping suitable for YAML."""
        return {
            "capacity": self.capacity,
            "lower_bound": self.lower_bound,
            "upper_bound": self.upper_bound,
            "model": self.model,
            "target_mean": self.target_mean,
            "reversion_rate": self.reversion_rate,
            "noise_amplitude": self.noise_amplitude,
            "tick_interval_ms": self.tick_interval_ms,
            "animation_duration_ms": self.animation_duration_ms,
            "max_labels": self.max_labels,
            "easing": self.easing,
            "seed_values": list(self.seed_values),
            "history": self.history.to_mapping() if self.history is not None else None,
            "gauge_max": self.gauge_max,
            "unit": self.unit,
            "label": self.label,
        }


CHANNEL_PRESETS: Dict[str, ChannelConfig] = {
    "soil_humidity": ChannelConfig(
        name="soil_humidity",
        capacity=24,
        lower_bound=5.0,
        upper_bound=95.0,
        model="mean_reverting",
        target_mean=50.0,
        reversion_rate=0.05,
        noise_amplitude=8.0,
        animation_duration_ms=700,
        max_labels=6,
        history=HistoryProfile(),
        gauge_max=100.0,
        unit="%",
        label="Soil humidity",
    ),
    "air_humidity": ChannelConfig(
        name="air_humidity",
        capacity=7,
        lower_bound=60.0,
        upper_bound=70.0,
        model="uniform",
        reversion_rate=0.0,
        noise_amplitude=0.0,
        animation_duration_ms=800,
        max_labels=7,
        seed_values=(60.0, 62.0, 61.0, 63.0, 65.0, 66.0, 64.0),
        gauge_max=100.0,
        unit="%",
        label="Air humidity",
    ),
    "air_temperature": ChannelConfig(
        name="air_temperature",
        capacity=7,
        lower_bound=23.0,
        upper_bound=29.0,
        model="uniform",
        reversion_rate=0.0,
        noise_amplitude=0.0,
        animation_duration_ms=800,
        max_labels=7,
        seed_values=(24.0, 25.0, 23.0, 26.0, 27.0, 28.0, 26.0),
        gauge_max=50.0,
        unit="°C",
        label="Air temperature",
    ),
    "light": ChannelConfig(
        name="light",
        capacity=7,
        lower_bound=300.0,
        upper_bound=600.0,
        model="uniform",
        reversion_rate=0.0,
        noise_amplitude=0.0,
        animation_duration_ms=800,
        max_labels=7,
        seed_values=(300.0, 320.0, 340.0, 360.0, 400.0, 420.0, 440.0),
        unit=" lux",
        label="Light intensity",
    ),
}

CHANNEL_NAMES = tuple(CHANNEL_PRESETS)


def preset(name: str) -> ChannelConfig:
    """Return the built-in preset for ``name``."""
    try:
        return CHANNEL_PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown channel preset {name!r}") from None


def default_channels() -> Dict[str, ChannelConfig]:
    return dict(CHANNEL_PRESETS)


__all__ = [
    "CHANNEL_NAMES",
    "CHANNEL_PRESETS",
    "ChannelConfig",
    "DEFAULT_TICK_INTERVAL_MS",
    "EASINGS",
    "HistoryProfile",
    "InvalidConfiguration",
    "MODELS",
    "default_channels",
    "preset",
]
