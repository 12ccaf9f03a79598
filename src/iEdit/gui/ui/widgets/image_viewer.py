"""Canvas that fits the working image into the editor frame."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QPixmap, QResizeEvent
from PySide6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from ....config import MAX_ZOOM, MIN_ZOOM, ZOOM_STEP
from ..palette import VIEWER_BACKGROUND_HEX


class ImageViewer(QWidget):
    """Show a pixmap scaled to fit the viewport, with a keyboard zoom factor.

    At zoom ``1.0`` the image is shrunk to fit while keeping its aspect ratio;
    images smaller than the viewport stay at their natural size.  Larger zoom
    factors scroll inside the frame.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None
        self._zoom = 1.0

        self._label = QLabel(self)
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._scroll_area = QScrollArea(self)
        self._scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self._scroll_area.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._scroll_area.setWidgetResizable(False)
        self._scroll_area.setStyleSheet(f"background-color: {VIEWER_BACKGROUND_HEX}; border: none;")
        self._scroll_area.setWidget(self._label)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._scroll_area)

    def set_pixmap(self, pixmap: QPixmap, *, keep_zoom: bool = False) -> None:
        """Display *pixmap*.

        Filters hand over an image of unchanged size, in which case
        ``keep_zoom`` preserves the current zoom factor.
        """

        same_size = self._pixmap is not None and self._pixmap.size() == pixmap.size()
        if not (keep_zoom and same_size):
            self._zoom = 1.0
        self._pixmap = pixmap
        self._render()

    def pixmap(self) -> Optional[QPixmap]:
        """Return a copy of the unscaled pixmap on display."""

        if self._pixmap is None:
            return None
        return QPixmap(self._pixmap)

    def zoom_factor(self) -> float:
        return self._zoom

    def set_zoom(self, factor: float) -> None:
        self._zoom = max(MIN_ZOOM, min(MAX_ZOOM, float(factor)))
        self._render()

    def zoom_in(self) -> None:
        self.set_zoom(self._zoom + ZOOM_STEP)

    def zoom_out(self) -> None:
        self.set_zoom(self._zoom - ZOOM_STEP)

    def reset_zoom(self) -> None:
        self.set_zoom(1.0)

    def resizeEvent(self, event: QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._render()

    def _fit_scale(self) -> float:
        viewport = self._scroll_area.viewport().size()
        size = self._pixmap.size()
        if viewport.isEmpty() or size.isEmpty():
            return 1.0
        return min(
            viewport.width() / size.width(),
            viewport.height() / size.height(),
            1.0,
        )

    def _render(self) -> None:
        if self._pixmap is None or self._pixmap.isNull():
            return
        scale = self._fit_scale() * self._zoom
        target = QSize(
            max(1, round(self._pixmap.width() * scale)),
            max(1, round(self._pixmap.height() * scale)),
        )
        scaled = self._pixmap.scaled(
            target,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self._label.setPixmap(scaled)
        self._label.setFixedSize(scaled.size())


__all__ = ["ImageViewer"]
