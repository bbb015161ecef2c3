from __future__ import annotations

from typing import Callable, Iterable, Optional, Tuple

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QImage, QPainter, QPen, QPolygonF, QTransform
from PySide6.QtWidgets import QWidget

from triad_explorer.core.renderer import Rgba
from triad_explorer.core.viewport import Triangle


def to_qcolor(color: Rgba) -> QColor:
    qcolor = QColor(color.r, color.g, color.b)
    qcolor.setAlphaF(float(color.a))
    return qcolor


class TriadViewWidget(QWidget):
    """
    Drawing surface for the explorer.

    Triangles are painted into a QImage sized at device resolution; the
    widget only blits that buffer in ``paintEvent``.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(320, 280)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAccessibleName("Triad matrix explorer")
        self.setAccessibleDescription(
            "Genesis triad broken down into smaller fractal triangles colored by mining activity"
        )
        self._buffer = QImage()
        self._transform = QTransform()
        self._background = QColor(0, 0, 0)
        self._resize_handler: Optional[Callable[[], None]] = None

    def set_resize_handler(self, handler: Optional[Callable[[], None]]) -> None:
        self._resize_handler = handler

    def set_background(self, rgb: Tuple[int, int, int]) -> None:
        self._background = QColor(*rgb)

    def buffer(self) -> QImage:
        return self._buffer

    # DrawingSurface -------------------------------------------------------

    def rendered_size(self) -> Tuple[float, float]:
        return float(self.width()), float(self.height())

    def device_pixel_ratio(self) -> float:
        return float(self.devicePixelRatioF())

    def set_backing_size(self, width: int, height: int) -> None:
        self._buffer = QImage(max(1, width), max(1, height), QImage.Format.Format_ARGB32_Premultiplied)
        self._buffer.fill(self._background)

    def reset_transform(self) -> None:
        self._transform = QTransform()

    def scale(self, sx: float, sy: float) -> None:
        self._transform.scale(sx, sy)

    def clear(self) -> None:
        if not self._buffer.isNull():
            self._buffer.fill(self._background)

    def draw_triangles(self, triangles: Iterable[Triangle]) -> None:
        if self._buffer.isNull():
            return
        painter = QPainter(self._buffer)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.setTransform(self._transform)
            for points, fill, stroke in triangles:
                pen = QPen(to_qcolor(stroke.color))
                pen.setWidthF(stroke.width)
                painter.setPen(pen)
                painter.setBrush(QBrush(to_qcolor(fill)))
                painter.drawPolygon(QPolygonF([QPointF(p.x, p.y) for p in points]))
        finally:
            painter.end()

    # Qt events ------------------------------------------------------------

    def resizeEvent(self, event) -> None:  # noqa: N802
        super().resizeEvent(event)
        if self._resize_handler is not None:
            self._resize_handler()

    def showEvent(self, event) -> None:  # noqa: N802
        super().showEvent(event)
        if self._resize_handler is not None and self._buffer.isNull():
            self._resize_handler()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        if not self._buffer.isNull():
            painter.drawImage(QRectF(0.0, 0.0, float(self.width()), float(self.height())), self._buffer)
        painter.end()
