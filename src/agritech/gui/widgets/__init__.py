from .gauge import CircularGauge
from .stat_box import StatBox, ValueCard

__all__ = [
    "CircularGauge",
    "StatBox",
    "ValueCard",
]
