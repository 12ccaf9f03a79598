"""Top-level window hosting the toolbar, image viewer and status bar."""

from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtGui import QAction, QImage, QKeySequence, QPixmap
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...config import STATUS_READY, VIEWER_FIT_SIZE, WINDOW_SIZE, WINDOW_TITLE
from .controllers.edit_controller import EditController
from .palette import TOOLBAR_STYLESHEET, VIEWER_FRAME_STYLESHEET, WINDOW_STYLESHEET
from .widgets.chrome_status_bar import ChromeStatusBar
from .widgets.image_viewer import ImageViewer


class MainWindow(QMainWindow):
    """Editor window: Load / Original / Invert / Grayscale / Save."""

    def __init__(
        self,
        controller: Optional[EditController] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)
        self.setStyleSheet(WINDOW_STYLESHEET)

        self._controller = controller or EditController(dialog_parent=self, parent=self)

        central = QWidget(self)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self._toolbar = QWidget(central)
        self._toolbar.setObjectName("editToolbar")
        self._toolbar.setStyleSheet(TOOLBAR_STYLESHEET)
        toolbar_layout = QHBoxLayout(self._toolbar)
        toolbar_layout.setContentsMargins(10, 15, 10, 5)
        toolbar_layout.setSpacing(10)

        self._buttons: Dict[str, QPushButton] = {}
        for key, text in (
            ("load", "Load Image"),
            ("original", "Original"),
            ("invert", "Invert Colors"),
            ("grayscale", "Grayscale"),
            ("save", "Save Image"),
        ):
            button = QPushButton(text, self._toolbar)
            toolbar_layout.addWidget(button)
            self._buttons[key] = button
        toolbar_layout.addStretch(1)
        root_layout.addWidget(self._toolbar)

        self._viewer_frame = QFrame(central)
        self._viewer_frame.setObjectName("viewerFrame")
        self._viewer_frame.setStyleSheet(VIEWER_FRAME_STYLESHEET)
        self._viewer_frame.setMinimumSize(*VIEWER_FIT_SIZE)
        frame_layout = QVBoxLayout(self._viewer_frame)
        frame_layout.setContentsMargins(10, 10, 10, 10)
        self._viewer = ImageViewer(self._viewer_frame)
        frame_layout.addWidget(self._viewer)

        viewer_container = QWidget(central)
        container_layout = QVBoxLayout(viewer_container)
        container_layout.setContentsMargins(20, 20, 20, 20)
        container_layout.addWidget(self._viewer_frame)
        root_layout.addWidget(viewer_container, 1)

        self._status_bar = ChromeStatusBar(central)
        self._status_bar.showMessage(STATUS_READY)
        root_layout.addWidget(self._status_bar)

        self.setCentralWidget(central)

        self._buttons["load"].clicked.connect(lambda: self._controller.load_image())
        self._buttons["original"].clicked.connect(self._controller.restore_original)
        self._buttons["invert"].clicked.connect(self._controller.apply_invert)
        self._buttons["grayscale"].clicked.connect(self._controller.apply_grayscale)
        self._buttons["save"].clicked.connect(lambda: self._controller.save_image())

        self._install_shortcuts()

        self._controller.imageChanged.connect(self._handle_image_changed)
        self._controller.statusChanged.connect(self._status_bar.showMessage)
        self._controller.availabilityChanged.connect(self._refresh_controls)
        self._refresh_controls()

    # ------------------------------------------------------------------
    # Accessors used by tests and the entry point
    # ------------------------------------------------------------------
    @property
    def controller(self) -> EditController:
        return self._controller

    @property
    def viewer(self) -> ImageViewer:
        return self._viewer

    @property
    def status_bar(self) -> ChromeStatusBar:
        return self._status_bar

    def button(self, key: str) -> QPushButton:
        """Return the toolbar button registered under *key*."""

        return self._buttons[key]

    def action(self, key: str) -> QAction:
        """Return the keyboard shortcut action registered under *key*."""

        return self._actions[key]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _install_shortcuts(self) -> None:
        self._actions: Dict[str, QAction] = {}
        for key, sequence, slot in (
            ("load", QKeySequence.StandardKey.Open, lambda: self._controller.load_image()),
            ("save", QKeySequence.StandardKey.Save, lambda: self._controller.save_image()),
            ("invert", QKeySequence("Ctrl+I"), self._controller.apply_invert),
            ("grayscale", QKeySequence("Ctrl+G"), self._controller.apply_grayscale),
            ("original", QKeySequence("Ctrl+R"), self._controller.restore_original),
            ("zoom_in", QKeySequence.StandardKey.ZoomIn, self._viewer.zoom_in),
            ("zoom_out", QKeySequence.StandardKey.ZoomOut, self._viewer.zoom_out),
            ("zoom_reset", QKeySequence("Ctrl+0"), self._viewer.reset_zoom),
        ):
            action = QAction(self)
            action.setShortcut(QKeySequence(sequence))
            action.triggered.connect(slot)
            self.addAction(action)
            self._actions[key] = action

    def _handle_image_changed(self, image: QImage) -> None:
        self._viewer.set_pixmap(QPixmap.fromImage(image), keep_zoom=True)

    def _refresh_controls(self, *_args) -> None:
        # Poll the session rather than trusting the signal payload so the
        # buttons always mirror the real state.
        has_image = self._controller.has_image()
        for key in ("original", "invert", "grayscale", "save"):
            self._buttons[key].setEnabled(has_image)
            self._actions[key].setEnabled(has_image)


__all__ = ["MainWindow"]
