"""Runtime configuration for the dashboard: RNG seed, render rate, channels."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .channels import CHANNEL_PRESETS, ChannelConfig, InvalidConfiguration, default_channels

DEFAULT_RENDER_FPS = 60.0


@dataclass(slots=True)
class DashboardConfig:
    """
    Knobs shared by every channel of one dashboard.

    ``seed`` feeds the process-wide RNG (``None`` draws fresh entropy) and
    ``render_fps`` sets how often the GUI re-queries the gauge animators.
    """

    seed: Optional[int] = None
    render_fps: float = DEFAULT_RENDER_FPS
    channels: Dict[str, ChannelConfig] = field(default_factory=default_channels)

    def sanitized(self) -> DashboardConfig:
        """Return a copy with limits applied and every channel validated."""
        try:
            fps = float(self.render_fps)
        except (TypeError, ValueError):
            fps = DEFAULT_RENDER_FPS
        if fps != fps:  # NaN
            fps = DEFAULT_RENDER_FPS
        return DashboardConfig(
            seed=None if self.seed is None else int(self.seed),
            render_fps=max(1.0, min(240.0, fps)),
            channels={name: cfg.validate() for name, cfg in self.channels.items()},
        )

    def to_mapping(self) -> dict:
        return {
            "seed": self.seed,
            "render_fps": float(self.render_fps),
            "channels": {name: cfg.to_mapping() for name, cfg in self.channels.items()},
        }


def _channels_from_mapping(block: Any) -> Dict[str, ChannelConfig]:
    """Overlay a ``channels:`` block on the presets (``false`` drops a channel)."""
    channels = default_channels()
    if block is None:
        return channels
    if not isinstance(block, Mapping):
        raise InvalidConfiguration(f"'channels' must be a mapping, got {type(block).__name__}")
    for raw_name, overrides in block.items():
        name = str(raw_name)
        if overrides is False:
            channels.pop(name, None)
            continue
        if overrides is not None and not isinstance(overrides, Mapping):
            raise InvalidConfiguration(f"channel {name!r} must be a mapping")
        channels[name] = ChannelConfig.from_mapping(
            name,
            overrides,
            base=CHANNEL_PRESETS.get(name),
        )
    return channels


def config_from_mapping(data: Mapping[str, Any] | None) -> DashboardConfig:
    """Build :class:`DashboardConfig` from ``data`` (ignoring unknown keys)."""
    if not data:
        return DashboardConfig()
    seed = data.get("seed")
    render_fps = data.get("render_fps", DEFAULT_RENDER_FPS)
    cfg = DashboardConfig(
        seed=None if seed is None else int(seed),
        render_fps=render_fps,
        channels=_channels_from_mapping(data.get("channels")),
    )
    return cfg.sanitized()


def load_config(path: str | Path | None) -> DashboardConfig:
    """
    Load configuration from ``path``.

    Missing files fall back to default :class:`DashboardConfig`.
    """
    if path is None:
        return DashboardConfig()
    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        return DashboardConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


def save_config(path: str | Path, cfg: DashboardConfig) -> None:
    """Persist ``cfg`` as YAML, creating parent directories as needed."""
    path = Path(path).expanduser()
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(
            cfg.to_mapping(),
            fh,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


__all__ = ["DashboardConfig", "config_from_mapping", "load_config", "save_config"]
