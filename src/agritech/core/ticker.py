"""
Background thread that drives a :class:`ChannelController` on its tick interval.

Used for headless runs; the GUI drives controllers from ``QTimer`` instead.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .controller import ChannelController
from .models import Snapshot

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
SnapshotCallback = Callable[[Snapshot], None]


def ticker_loop(
    controller: ChannelController,
    stop_event: threading.Event,
    *,
    clock: Clock = time.time,
    on_snapshot: Optional[SnapshotCallback] = None,
) -> None:
    """
    Tick ``controller`` every ``tick_interval_ms`` until stopped or disposed.

    A failing tick is logged and ends the loop; a failing callback is logged
    and the loop keeps going.
    """
    interval_s = controller.config.tick_interval_s
    while not stop_event.wait(interval_s):
        if controller.disposed:
            break
        try:
            snapshot = controller.tick(clock())
        except Exception:
            logger.exception("Tick failed for channel %s; stopping ticker", controller.name)
            break

        if on_snapshot is None:
            continue
        try:
            on_snapshot(snapshot)
        except Exception:
            logger.exception("Snapshot callback failed for channel %s", controller.name)


@dataclass
class TickerHandle:
    thread: threading.Thread
    stop_event: threading.Event
    controller: ChannelController

    def stop(self, *, join: bool = False, timeout: Optional[float] = None) -> None:
        self.stop_event.set()
        self.controller.discard_dispose_callback(self.stop_event.set)
        if join:
            self.thread.join(timeout)

    def is_alive(self) -> bool:
        return self.thread.is_alive()


def start_ticker(
    controller: ChannelController,
    *,
    clock: Clock = time.time,
    on_snapshot: Optional[SnapshotCallback] = None,
    thread_name: Optional[str] = None,
) -> TickerHandle:
    """
    Start a daemon thread ticking ``controller``.

    Disposing the controller stops the thread as well. The dispose hook is
    removed again once the thread ends, so a controller can be restarted
    without piling up callbacks.
    """
    stop_event = threading.Event()

    def _target() -> None:
        try:
            ticker_loop(controller, stop_event, clock=clock, on_snapshot=on_snapshot)
        finally:
            controller.discard_dispose_callback(stop_event.set)

    thread = threading.Thread(
        target=_target,
        name=thread_name or f"AgritechTicker({controller.name})",
        daemon=True,
    )
    controller.on_dispose(stop_event.set)
    thread.start()
    return TickerHandle(thread=thread, stop_event=stop_event, controller=controller)


__all__ = ["TickerHandle", "start_ticker", "ticker_loop"]
