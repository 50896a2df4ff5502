"""Per-channel composition root: generator, window, reducers, and animator."""

from __future__ import annotations

import logging
import threading
import time
from enum import Enum
from typing import Callable, List, Optional

from ..config.channels import ChannelConfig
from ..tools.debug import time_block
from .animation import GaugeAnimator
from .generator import RandomSource, SampleGenerator, make_rng
from .labels import sample_labels
from .models import Sample, Snapshot
from .rolling_window import RollingWindow
from .stats import reduce_stats

logger = logging.getLogger(__name__)


class ControllerState(Enum):
    UNINITIALIZED = "uninitialized"
    SEEDED = "seeded"
    RUNNING = "running"
    DISPOSED = "disposed"


class ChannelController:
    """
    Owns one channel's simulation and publishes immutable :class:`Snapshot` objects.

    ``tick`` is the only operation that advances the window. It builds the
    complete next snapshot before swapping it in, so readers holding the
    previous snapshot never see a half-updated window. The tick timer itself
    belongs to the caller (a ``QTimer`` or :func:`~agritech.core.ticker.start_ticker`);
    callbacks registered with :meth:`on_dispose` let it be cancelled on disposal.
    """

    def __init__(
        self,
        config: ChannelConfig,
        *,
        rng: Optional[RandomSource] = None,
        now: Optional[float] = None,
    ) -> None:
        self._state = ControllerState.UNINITIALIZED
        self._config = config.validate()
        self._rng = rng if rng is not None else make_rng()
        self._generator = SampleGenerator(self._config, self._rng)
        self._window = RollingWindow(self._config.capacity)
        self._lock = threading.RLock()
        self._dispose_callbacks: List[Callable[[], None]] = []
        self._tick_count = 0

        created_at = time.time() if now is None else float(now)
        self._window.seed(self._generator.seed_samples(created_at))
        latest = self._window.latest()
        self._animator = GaugeAnimator(
            latest.value if latest is not None else 0.0,
            duration_ms=self._config.animation_duration_ms,
            easing=self._config.easing,
            now=created_at,
        )
        self._snapshot = self._build_snapshot(created_at)
        self._state = ControllerState.SEEDED
        logger.info(
            "Channel %s seeded with %d samples (capacity %d, model %s)",
            self._config.name,
            len(self._window),
            self._config.capacity,
            self._config.model,
        )

    # ---------------------------------------------------------------- props
    @property
    def config(self) -> ChannelConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def disposed(self) -> bool:
        return self._state is ControllerState.DISPOSED

    @property
    def tick_count(self) -> int:
        return self._tick_count

    # -------------------------------------------------------------- advance
    def tick(self, now: float) -> Snapshot:
        """Generate one sample, absorb it, and publish the resulting snapshot."""
        with self._lock:
            if self._state is ControllerState.DISPOSED:
                raise RuntimeError(f"Channel {self.name} has been disposed")

            with time_block(f"tick {self.name}", emitter=logger.debug):
                latest = self._window.latest()
                previous = latest.value if latest is not None else self._config.mean
                value = self._generator.next(previous)

                timestamp = float(now)
                if latest is not None and timestamp < latest.timestamp:
                    logger.debug(
                        "Channel %s: clock went back (%.3f < %.3f); reusing newest timestamp",
                        self.name,
                        timestamp,
                        latest.timestamp,
                    )
                    timestamp = latest.timestamp

                self._window.push(Sample(timestamp=timestamp, value=value))
                self._animator.retarget(value, now)
                self._tick_count += 1
                snapshot = self._build_snapshot(now)
                self._snapshot = snapshot
                self._state = ControllerState.RUNNING

            logger.debug("Channel %s tick #%d -> %s", self.name, self._tick_count, value)
            return snapshot

    # ----------------------------------------------------------------- read
    def get_snapshot(self) -> Snapshot:
        """Return the latest published snapshot without advancing anything."""
        return self._snapshot

    def gauge_value(self, now: float) -> float:
        """Animated gauge position at ``now``; safe to poll every frame."""
        return self._animator.value_at(now)

    # -------------------------------------------------------------- dispose
    def on_dispose(self, callback: Callable[[], None]) -> None:
        """Register ``callback`` (e.g. a timer's ``stop``) to run on disposal."""
        with self._lock:
            if self._state is ControllerState.DISPOSED:
                callback()
                return
            self._dispose_callbacks.append(callback)

    def discard_dispose_callback(self, callback: Callable[[], None]) -> bool:
        """Unregister ``callback``; returns False if it was not registered."""
        with self._lock:
            try:
                self._dispose_callbacks.remove(callback)
            except ValueError:
                return False
            return True

    def dispose(self) -> None:
        """Stop further ticks and run the registered cancellation callbacks."""
        with self._lock:
            if self._state is ControllerState.DISPOSED:
                return
            self._state = ControllerState.DISPOSED
            callbacks, self._dispose_callbacks = self._dispose_callbacks, []
        for callback in callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Dispose callback failed for channel %s", self.name)
        logger.info("Channel %s disposed after %d ticks", self.name, self._tick_count)

    # -------------------------------------------------------------- helpers
    def _build_snapshot(self, now: float) -> Snapshot:
        samples = self._window.snapshot()
        latest = samples[-1] if samples else None
        return Snapshot(
            channel=self.name,
            stats=reduce_stats(samples),
            series=tuple(sample.value for sample in samples),
            labels=tuple(sample_labels([s.timestamp for s in samples], self._config.max_labels)),
            gauge_value=self._animator.value_at(now),
            timestamp=latest.timestamp if latest is not None else None,
            tick_count=self._tick_count,
        )


__all__ = ["ChannelController", "ControllerState"]
