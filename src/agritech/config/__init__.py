"""Configuration objects and helpers for the Agritech dashboard.

Every simulated channel is described by a frozen :class:`ChannelConfig`
(capacity, bounds, random-walk parameters, tick and animation timing). The
built-in presets mirror the soil, air, and light screens; a YAML file loaded
through :mod:`runtime` can override them or add channels.
"""

from .channels import (
    CHANNEL_NAMES,
    CHANNEL_PRESETS,
    ChannelConfig,
    HistoryProfile,
    InvalidConfiguration,
    preset,
)
from .runtime import DashboardConfig, config_from_mapping, load_config, save_config

__all__ = [
    "CHANNEL_NAMES",
    "CHANNEL_PRESETS",
    "ChannelConfig",
    "DashboardConfig",
    "HistoryProfile",
    "InvalidConfiguration",
    "config_from_mapping",
    "load_config",
    "preset",
    "save_config",
]
