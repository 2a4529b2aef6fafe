"""
Image display widget with zoom and pan.

Paints the current image fitted to the widget, scaled by the zoom factor and
shifted by the pan offset. Mouse wheel zooms, left-drag pans.
"""

from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import QImage, QPainter, QColor
from PySide6.QtWidgets import QWidget

from ..view_state import ViewTransform, ZOOM_STEP

# Margin kept around the fitted image, in pixels
FIT_MARGIN = 20


class ImageView(QWidget):
    """Zoomable, pannable image canvas."""

    # Signal: emitted with the new zoom factor
    zoom_changed = Signal(float)

    def __init__(self):
        super().__init__()
        self.image: Optional[QImage] = None
        self.view = ViewTransform()
        self._drag_start: Optional[QPointF] = None
        self.setMinimumSize(400, 300)
        self.setCursor(Qt.CursorShape.OpenHandCursor)

    def set_image(self, image: Optional[QImage], reset_view: bool = False) -> None:
        """Show a new image; reset_view goes back to 100% and centered."""
        self.image = image
        if reset_view:
            self.view.reset()
            self.zoom_changed.emit(self.view.zoom)
        self.update()

    def zoom_in(self) -> None:
        self._set_zoom_delta(ZOOM_STEP)

    def zoom_out(self) -> None:
        self._set_zoom_delta(-ZOOM_STEP)

    def _set_zoom_delta(self, delta: float) -> None:
        self.view.adjust_zoom(delta)
        self.zoom_changed.emit(self.view.zoom)
        self.update()

    def _fit_scale(self) -> float:
        """Scale that fits the whole image inside the widget at zoom 1."""
        if self.image is None or self.image.isNull():
            return 1.0
        max_w = max(self.width() - 2 * FIT_MARGIN, 1)
        max_h = max(self.height() - 2 * FIT_MARGIN, 1)
        return min(max_w / self.image.width(), max_h / self.image.height())

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(40, 40, 40))

        if self.image is None or self.image.isNull():
            painter.setPen(QColor(160, 160, 160))
            painter.drawText(
                self.rect(),
                Qt.AlignmentFlag.AlignCenter,
                "Drop an image here or click Open",
            )
            painter.end()
            return

        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        fit = self._fit_scale()
        width = self.image.width() * fit
        height = self.image.height() * fit

        # Zoom around the widget center, then translate by the pan offset
        painter.translate(self.width() / 2, self.height() / 2)
        painter.scale(self.view.zoom, self.view.zoom)
        painter.translate(self.view.offset_x, self.view.offset_y)

        target = QRectF(-width / 2, -height / 2, width, height)
        painter.drawImage(target, self.image)
        painter.end()

    def wheelEvent(self, event) -> None:
        self.view.zoom_for_wheel(event.angleDelta().y())
        self.zoom_changed.emit(self.view.zoom)
        self.update()
        event.accept()

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._drag_start = event.position()
            self.setCursor(Qt.CursorShape.ClosedHandCursor)

    def mouseMoveEvent(self, event) -> None:
        if self._drag_start is None:
            return
        position = event.position()
        self.view.pan(position.x() - self._drag_start.x(), position.y() - self._drag_start.y())
        self._drag_start = position
        self.update()

    def mouseReleaseEvent(self, event) -> None:
        self._drag_start = None
        self.setCursor(Qt.CursorShape.OpenHandCursor)
