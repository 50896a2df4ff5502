from __future__ import annotations

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from ...core.animation import gauge_fraction
from ...core.numeric import format_reading


class CircularGauge(QWidget):
    """
    Ring gauge: a faint full-circle track and a coloured arc swept clockwise
    from twelve o'clock in proportion to ``value / full_scale``.
    """

    def __init__(
        self,
        *,
        full_scale: float,
        unit: str = "",
        caption: str = "",
        color: str = "#80dbf5",
        stroke_width: int = 18,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._full_scale = float(full_scale)
        self._unit = unit
        self._caption = caption
        self._color = QColor(color)
        self._stroke = stroke_width
        self._value = 0.0
        self.setMinimumSize(160, 160)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    def value(self) -> float:
        return self._value

    def setValue(self, value: float) -> None:
        if value == self._value:
            return
        self._value = float(value)
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        side = min(self.width(), self.height()) - self._stroke - 4
        if side <= 0:
            return
        rect = QRectF(
            (self.width() - side) / 2.0,
            (self.height() - side) / 2.0,
            side,
            side,
        )

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        track = QPen(QColor(255, 255, 255, 30), self._stroke)
        painter.setPen(track)
        painter.drawArc(rect, 0, 360 * 16)

        arc = QPen(self._color, self._stroke)
        arc.setCapStyle(Qt.RoundCap)
        painter.setPen(arc)
        span = -int(round(gauge_fraction(self._value, self._full_scale) * 360 * 16))
        painter.drawArc(rect, 90 * 16, span)

        font = QFont(self.font())
        font.setPointSizeF(max(10.0, side / 7.0))
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QColor("#ffffff"))
        painter.drawText(rect, Qt.AlignCenter, format_reading(self._value, self._unit))

        if self._caption:
            small = QFont(self.font())
            small.setPointSizeF(max(8.0, side / 18.0))
            painter.setFont(small)
            painter.setPen(QColor(255, 255, 255, 150))
            caption_rect = rect.adjusted(0, side * 0.25, 0, 0)
            painter.drawText(caption_rect, Qt.AlignCenter, self._caption)
        painter.end()
