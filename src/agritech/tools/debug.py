"""
Per-tick timing for channel controllers.

Set ``AGRITECH_DEBUG=1`` to have every :meth:`ChannelController.tick` report
how long it took to generate, push, reduce and publish its snapshot. Timings
go to the ``agritech.tools.debug`` logger unless a caller passes its own
emitter; with the flag unset the wrapper does nothing.
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

logger = logging.getLogger(__name__)

DEBUG_AGRITECH = os.getenv("AGRITECH_DEBUG", "").lower() in {"1", "true", "yes", "on"}

Emitter = Callable[[str], None]


def debug_enabled() -> bool:
    return DEBUG_AGRITECH


@contextmanager
def time_block(label: str, *, emitter: Optional[Emitter] = None) -> Iterator[None]:
    """Report the wall time spent inside the block as ``"<label>: 0.123 ms"``."""
    if not debug_enabled():
        yield
        return

    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        (emitter or logger.info)(f"{label}: {elapsed_ms:.3f} ms")


__all__ = ["DEBUG_AGRITECH", "debug_enabled", "time_block"]
