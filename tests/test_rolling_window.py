import pytest

from agritech.core.models import Sample
from agritech.core.rolling_window import RollingWindow


def _samples(count: int, start: float = 0.0) -> list[Sample]:
    return [Sample(timestamp=start + i, value=float(i * 10)) for i in range(count)]


def test_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        RollingWindow(0)


def test_length_never_exceeds_capacity() -> None:
    window = RollingWindow(5)
    for pushed, sample in enumerate(_samples(12), start=1):
        window.push(sample)
        assert len(window) == min(pushed, 5)
        assert len(window.snapshot()) <= window.capacity


def test_overflow_evicts_oldest_and_keeps_order() -> None:
    capacity = 7
    samples = _samples(capacity + 1)
    window = RollingWindow(capacity)
    for sample in samples:
        window.push(sample)

    assert window.snapshot() == tuple(samples[1:])
    assert window.values() == tuple(s.value for s in samples[1:])
    assert window.latest() == samples[-1]
    assert window[0] == samples[1]


def test_empty_window_reads() -> None:
    window = RollingWindow(3)
    assert window.snapshot() == ()
    assert window.latest() is None
    with pytest.raises(IndexError):
        window[0]


def test_seed_keeps_newest_samples() -> None:
    window = RollingWindow(3)
    window.seed(_samples(5))
    assert window.timestamps() == (2.0, 3.0, 4.0)


def test_seed_only_once() -> None:
    window = RollingWindow(3)
    window.seed(_samples(2))
    with pytest.raises(RuntimeError):
        window.seed(_samples(1))


def test_push_rejects_older_sample() -> None:
    window = RollingWindow(3)
    window.push(Sample(timestamp=10.0, value=1.0))
    with pytest.raises(ValueError):
        window.push(Sample(timestamp=9.0, value=2.0))
    # Equal timestamps are allowed
    window.push(Sample(timestamp=10.0, value=3.0))
    assert window.values() == (1.0, 3.0)


def test_snapshot_is_detached_from_later_pushes() -> None:
    window = RollingWindow(2)
    window.seed(_samples(2))
    before = window.snapshot()
    window.push(Sample(timestamp=5.0, value=99.0))
    assert before == tuple(_samples(2))
    assert window.values() == (10.0, 99.0)
