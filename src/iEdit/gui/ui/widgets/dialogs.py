"""Reusable dialog helpers for the desktop UI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QFileDialog, QWidget

from ....config import (
    OPEN_DIALOG_CAPTION,
    OPEN_DIALOG_FILTER,
    SAVE_DIALOG_CAPTION,
    SAVE_DIALOG_FILTER,
)


def select_image_to_open(parent: Optional[QWidget], start: Optional[Path] = None) -> Optional[Path]:
    """Return the image chosen by the user or ``None`` when cancelled."""

    directory = str(start) if start is not None else ""
    path, _selected_filter = QFileDialog.getOpenFileName(
        parent, OPEN_DIALOG_CAPTION, directory, OPEN_DIALOG_FILTER
    )
    if not path:
        return None
    return Path(path)


def select_save_destination(parent: Optional[QWidget], start: Optional[Path] = None) -> Optional[Path]:
    """Return the PNG destination chosen by the user or ``None`` when cancelled."""

    directory = str(start) if start is not None else ""
    path, _selected_filter = QFileDialog.getSaveFileName(
        parent, SAVE_DIALOG_CAPTION, directory, SAVE_DIALOG_FILTER
    )
    if not path:
        return None
    return Path(path)

