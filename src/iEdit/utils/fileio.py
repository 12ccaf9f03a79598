"""Helpers for writing exported images to disk atomically."""

from __future__ import annotations

import os
import time
from pathlib import Path


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Atomically write *data* into *path*.

    The payload lands in a sibling ``.tmp`` file first and is then swapped into
    place, so a failed export never leaves a truncated image behind.  The
    temporary file is removed whenever the write or the swap fails.
    """

    tmp_path = path.with_suffix(path.suffix + ".tmp")
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with tmp_path.open("wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        _replace_with_retry(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def _replace_with_retry(tmp_path: Path, path: Path) -> None:
    # ``Path.replace`` can intermittently fail on Windows while antivirus or
    # indexing services hold the destination open.
    for attempt in range(5):
        try:
            tmp_path.replace(path)
            return
        except PermissionError:
            if attempt == 4:
                raise
            time.sleep(0.05 * (attempt + 1))
