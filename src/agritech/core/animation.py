"""Time-based tweening of the gauge needle, independent of the tick cadence."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Dict

from .numeric import clamp

EasingFn = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_out(t: float) -> float:
    """Cubic ease-out: fast start, gentle arrival."""
    return 1.0 - (1.0 - t) ** 3


def ease_in_out(t: float) -> float:
    """Quadratic ease-in-out."""
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - ((-2.0 * t + 2.0) ** 2) / 2.0


EASINGS: Dict[str, EasingFn] = {
    "linear": linear,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def resolve_easing(name: str) -> EasingFn:
    try:
        return EASINGS[name]
    except KeyError:
        raise ValueError(f"Unknown easing {name!r}") from None


@dataclass(frozen=True, slots=True)
class AnimatedValue:
    """
    A value in transit from ``start`` to ``target``.

    Times are POSIX seconds; ``duration_ms`` is the length of one tween.
    """

    start: float
    target: float
    started_at: float
    duration_ms: float

    def progress(self, now: float) -> float:
        """Linear progress in ``[0, 1]``; a clock running backwards yields 0."""
        duration_s = self.duration_ms / 1000.0
        if duration_s <= 0.0:
            return 1.0
        return clamp((now - self.started_at) / duration_s, 0.0, 1.0)

    def value_at(self, now: float, easing: EasingFn = ease_out) -> float:
        t = self.progress(now)
        if t >= 1.0:
            return self.target
        if t <= 0.0:
            return self.start
        value = self.start + (self.target - self.start) * easing(t)
        lo, hi = min(self.start, self.target), max(self.start, self.target)
        return clamp(value, lo, hi)

    def retargeted(self, target: float, now: float, easing: EasingFn = ease_out) -> "AnimatedValue":
        """Start a new tween at the currently displayed value."""
        return AnimatedValue(
            start=self.value_at(now, easing),
            target=float(target),
            started_at=float(now),
            duration_ms=self.duration_ms,
        )


class GaugeAnimator:
    """
    Smoothed scalar that tweens toward the latest sample.

    ``value_at`` may be polled at any rate between retargets; once a tween
    finishes the animator is settled and returns ``target`` unchanged.
    Retargets and reads may come from different threads (a ticker writing,
    a render loop polling).
    """

    def __init__(
        self,
        initial: float,
        *,
        duration_ms: float,
        easing: str = "ease_out",
        now: float = 0.0,
    ) -> None:
        self._easing = resolve_easing(easing)
        self._state = AnimatedValue(
            start=float(initial),
            target=float(initial),
            started_at=float(now),
            duration_ms=float(duration_ms),
        )
        self._settled = True
        self._lock = threading.RLock()

    @property
    def state(self) -> AnimatedValue:
        return self._state

    @property
    def target(self) -> float:
        return self._state.target

    @property
    def settled(self) -> bool:
        return self._settled

    def retarget(self, new_target: float, now: float) -> None:
        """
        Tween from the value currently on screen toward ``new_target``.

        A ``now`` earlier than the running tween's start is moved up to it, so
        the new start matches what a regressed clock was already shown.
        """
        with self._lock:
            state = self._state
            at = max(float(now), state.started_at)
            if self._settled:
                self._state = AnimatedValue(
                    start=state.target,
                    target=float(new_target),
                    started_at=at,
                    duration_ms=state.duration_ms,
                )
            else:
                self._state = state.retargeted(new_target, at, self._easing)
            self._settled = False

    def value_at(self, now: float) -> float:
        with self._lock:
            state = self._state
            if self._settled:
                return state.target
            if state.progress(now) >= 1.0:
                # only settle the tween that was actually checked
                if self._state is state:
                    self._settled = True
                return state.target
            return state.value_at(now, self._easing)


def gauge_fraction(value: float, full_scale: float) -> float:
    """Fraction of a full gauge sweep for ``value`` (clamped to ``[0, 1]``)."""
    if full_scale <= 0.0:
        return 0.0
    return clamp(value / full_scale, 0.0, 1.0)


__all__ = [
    "AnimatedValue",
    "EASINGS",
    "EasingFn",
    "GaugeAnimator",
    "ease_in_out",
    "ease_out",
    "gauge_fraction",
    "linear",
    "resolve_easing",
]
