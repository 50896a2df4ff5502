from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import Sample


class RollingWindow:
    """
    Fixed-capacity, time-ordered buffer of :class:`Sample` objects.

    When full, the oldest sample is evicted before the new one is appended,
    so the length never exceeds ``capacity``.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._slots: list[Sample | None] = [None] * capacity
        self._start = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, sample: Sample) -> None:
        """Append ``sample``; it must not be older than the newest sample."""
        if self._size and sample.timestamp < self[-1].timestamp:
            raise ValueError(
                f"sample at {sample.timestamp} is older than the newest sample at {self[-1].timestamp}"
            )
        idx = (self._start + self._size) % self._capacity
        self._slots[idx] = sample
        if self._size < self._capacity:
            self._size += 1
        else:
            self._start = (self._start + 1) % self._capacity

    def seed(self, samples: Iterable[Sample]) -> None:
        """Pre-populate an empty window, keeping the newest ``capacity`` samples."""
        if self._size:
            raise RuntimeError("RollingWindow can only be seeded while empty")
        for sample in list(samples)[-self._capacity:]:
            self.push(sample)

    def snapshot(self) -> tuple[Sample, ...]:
        """Return the logical contents, oldest first."""
        return tuple(self)

    def values(self) -> tuple[float, ...]:
        return tuple(sample.value for sample in self)

    def timestamps(self) -> tuple[float, ...]:
        return tuple(sample.timestamp for sample in self)

    def latest(self) -> Sample | None:
        """Return the newest sample, or ``None`` if the window is empty."""
        if self._size == 0:
            return None
        return self[-1]

    def clear(self) -> None:
        self._slots = [None] * self._capacity
        self._start = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Sample:
        """Support win[i] and win[-1] indexing over the *logical* contents."""
        size = self._size
        if size == 0:
            raise IndexError("RollingWindow is empty")

        if index < 0:
            index += size

        if index < 0 or index >= size:
            raise IndexError("RollingWindow index out of range")

        item = self._slots[(self._start + index) % self._capacity]
        assert item is not None
        return item

    def __iter__(self) -> Iterator[Sample]:
        for i in range(self._size):
            item = self._slots[(self._start + i) % self._capacity]
            if item is not None:
                yield item
