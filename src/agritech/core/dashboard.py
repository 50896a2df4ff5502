"""Factory helpers that wire one :class:`ChannelController` per configured channel."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from ..config import DashboardConfig
from .controller import ChannelController
from .generator import RandomSource, make_rng
from .models import Snapshot

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Dashboard:
    """Independent channel controllers sharing one RNG."""

    config: DashboardConfig
    controllers: Dict[str, ChannelController] = field(default_factory=dict)

    def __getitem__(self, name: str) -> ChannelController:
        return self.controllers[name]

    def __contains__(self, name: object) -> bool:
        return name in self.controllers

    def __iter__(self) -> Iterator[str]:
        return iter(self.controllers)

    def snapshots(self) -> Dict[str, Snapshot]:
        return {name: ctrl.get_snapshot() for name, ctrl in self.controllers.items()}

    def tick_all(self, now: float) -> Dict[str, Snapshot]:
        """Advance every live channel once (handy for tests and headless use)."""
        return {
            name: ctrl.tick(now)
            for name, ctrl in self.controllers.items()
            if not ctrl.disposed
        }

    def dispose(self) -> None:
        for ctrl in self.controllers.values():
            ctrl.dispose()


def build_dashboard(
    cfg: DashboardConfig,
    *,
    rng: Optional[RandomSource] = None,
    now: Optional[float] = None,
) -> Dashboard:
    """
    Build a :class:`Dashboard` from configuration.

    Parameters
    ----------
    cfg:
        Runtime configuration (usually loaded from YAML).
    rng:
        Shared random source. Defaults to a generator seeded from ``cfg.seed``.
    now:
        Construction time used to timestamp the seeded windows.
    """
    normalized = cfg.sanitized()
    source = rng if rng is not None else make_rng(normalized.seed)
    created_at = time.time() if now is None else float(now)

    controllers = {
        name: ChannelController(channel_cfg, rng=source, now=created_at)
        for name, channel_cfg in normalized.channels.items()
    }
    logger.info(
        "Dashboard ready with channels %s (seed=%s)",
        ", ".join(controllers) or "<none>",
        normalized.seed,
    )
    return Dashboard(config=normalized, controllers=controllers)


__all__ = ["Dashboard", "build_dashboard"]
