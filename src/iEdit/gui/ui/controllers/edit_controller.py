"""Controller that routes toolbar actions to the :class:`EditSession`."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QImage
from PySide6.QtWidgets import QWidget

from ....config import (
    STATUS_GRAYSCALE,
    STATUS_INVERTED,
    STATUS_LOAD_FAILED,
    STATUS_LOADED,
    STATUS_NO_IMAGE_GRAYSCALE,
    STATUS_NO_IMAGE_INVERT,
    STATUS_NO_IMAGE_SAVE,
    STATUS_NO_ORIGINAL,
    STATUS_RESTORED,
    STATUS_SAVE_FAILED,
    STATUS_SAVED,
)
from ....core.filters import FilterKind
from ....core.session import EditSession
from ....errors import CodecError, NoImageLoadedError
from ....io.codec import load_image, save_image
from ....utils.logging import logger
from ..qimage_bridge import buffer_to_qimage
from ..widgets.dialogs import select_image_to_open, select_save_destination

PathPicker = Callable[[Optional[QWidget], Optional[Path]], Optional[Path]]

_FILTER_STATUS = {
    FilterKind.INVERT: STATUS_INVERTED,
    FilterKind.GRAYSCALE: STATUS_GRAYSCALE,
}

_NO_IMAGE_STATUS = {
    FilterKind.INVERT: STATUS_NO_IMAGE_INVERT,
    FilterKind.GRAYSCALE: STATUS_NO_IMAGE_GRAYSCALE,
}


class EditController(QObject):
    """Own the edit session and translate its results into Qt signals."""

    imageChanged = Signal(QImage)
    """Emitted with a fresh copy of the working image after every change."""

    statusChanged = Signal(str)
    """Emitted with the text the status bar should display."""

    availabilityChanged = Signal(bool)
    """Emitted when the session gains or loses an image."""

    def __init__(
        self,
        *,
        session: Optional[EditSession] = None,
        dialog_parent: Optional[QWidget] = None,
        open_picker: PathPicker = select_image_to_open,
        save_picker: PathPicker = select_save_destination,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else EditSession()
        self._dialog_parent = dialog_parent
        self._open_picker = open_picker
        self._save_picker = save_picker
        self._last_directory: Optional[Path] = None
        self._status = ""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def session(self) -> EditSession:
        return self._session

    def has_image(self) -> bool:
        return self._session.has_image

    def status(self) -> str:
        """Return the most recent status message."""

        return self._status

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def load_image(self, path: Optional[Path | str] = None) -> bool:
        """Load *path*, prompting the user when it is not provided.

        Returns ``True`` when a new image replaced the session contents.  A
        cancelled dialog returns ``False`` without touching the status bar.
        """

        if path is None:
            path = self._open_picker(self._dialog_parent, self._last_directory)
            if path is None:
                return False
        path = Path(path)

        try:
            buffer = load_image(path)
        except CodecError as exc:
            logger.warning("Failed to load %s: %s", path, exc)
            self._set_status(STATUS_LOAD_FAILED.format(reason=exc))
            return False

        had_image = self._session.has_image
        self._session.load(buffer, source=path)
        self._last_directory = path.parent
        self._emit_current()
        self._set_status(STATUS_LOADED.format(name=path.name))
        if not had_image:
            self.availabilityChanged.emit(True)
        return True

    def restore_original(self) -> bool:
        """Discard every filter applied since the image was loaded."""

        try:
            self._session.reset_to_original()
        except NoImageLoadedError:
            self._set_status(STATUS_NO_ORIGINAL)
            return False
        self._emit_current()
        self._set_status(STATUS_RESTORED)
        return True

    def apply_filter(self, kind: FilterKind) -> bool:
        """Apply *kind* to the working image and refresh the view."""

        kind = FilterKind(kind)
        try:
            self._session.apply_filter(kind)
        except NoImageLoadedError:
            self._set_status(_NO_IMAGE_STATUS[kind])
            return False
        self._emit_current()
        self._set_status(_FILTER_STATUS[kind])
        return True

    def apply_invert(self) -> bool:
        return self.apply_filter(FilterKind.INVERT)

    def apply_grayscale(self) -> bool:
        return self.apply_filter(FilterKind.GRAYSCALE)

    def save_image(self, path: Optional[Path | str] = None) -> bool:
        """Write the working image as PNG, prompting for *path* if needed."""

        try:
            snapshot = self._session.snapshot()
        except NoImageLoadedError:
            self._set_status(STATUS_NO_IMAGE_SAVE)
            return False

        if path is None:
            path = self._save_picker(self._dialog_parent, self._last_directory)
            if path is None:
                return False

        try:
            written = save_image(snapshot, path)
        except CodecError as exc:
            logger.warning("Failed to save %s: %s", path, exc)
            self._set_status(STATUS_SAVE_FAILED.format(reason=exc))
            return False
        self._last_directory = written.parent
        self._set_status(STATUS_SAVED.format(path=written.resolve()))
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _emit_current(self) -> None:
        self.imageChanged.emit(buffer_to_qimage(self._session.get_current()))

    def _set_status(self, message: str) -> None:
        self._status = message
        self.statusChanged.emit(message)


__all__ = ["EditController"]
