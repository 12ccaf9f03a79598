"""Status line shown beneath the editor canvas."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QWidget

from ..palette import STATUS_BAR_STYLESHEET


class ChromeStatusBar(QWidget):
    """Single-label bar styled to match the toolbar.

    The main window forwards every ``EditController.statusChanged`` message to
    :meth:`showMessage`; the text stays until the next action replaces it.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("chromeStatusBar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setStyleSheet(STATUS_BAR_STYLESHEET)

        self._message_label = QLabel(self)
        self._message_label.setObjectName("statusMessageLabel")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 5, 10, 5)
        layout.addWidget(self._message_label, 1)

    def showMessage(self, message: str) -> None:  # noqa: N802 - Qt-style API
        self._message_label.setText(message)

    def currentMessage(self) -> str:  # noqa: N802 - Qt-style API
        return self._message_label.text()


__all__ = ["ChromeStatusBar"]
