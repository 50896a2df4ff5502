from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from ...core.models import DerivedStats
from ...core.numeric import format_reading


class StatBox(QFrame):
    """Minimum / average / maximum row fed from :class:`DerivedStats`."""

    def __init__(self, unit: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._unit = unit
        self.setFrameShape(QFrame.StyledPanel)

        layout = QHBoxLayout(self)
        self._values: dict[str, QLabel] = {}
        for key, title in (("min", "Minimum"), ("average", "Average"), ("max", "Maximum")):
            column = QVBoxLayout()
            caption = QLabel(title)
            caption.setAlignment(Qt.AlignCenter)
            value = QLabel("--")
            value.setAlignment(Qt.AlignCenter)
            value.setStyleSheet("font-size: 20px; font-weight: 700;")
            column.addWidget(caption)
            column.addWidget(value)
            layout.addLayout(column)
            self._values[key] = value

    def setStats(self, stats: DerivedStats) -> None:
        for key, label in self._values.items():
            label.setText(format_reading(getattr(stats, key), self._unit))


class ValueCard(QFrame):
    """Single headline reading (title over a large value)."""

    def __init__(self, title: str, unit: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._unit = unit
        self.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(title))
        self._value = QLabel("--")
        self._value.setStyleSheet("font-size: 28px; font-weight: 700;")
        layout.addWidget(self._value)

    def setValue(self, value: float) -> None:
        self._value.setText(format_reading(value, self._unit))
