"""Conversion from :class:`PixelBuffer` to Qt image types for display."""

from __future__ import annotations

import numpy as np
from PySide6.QtGui import QImage

from ...core.pixel_buffer import PixelBuffer


def buffer_to_qimage(buffer: PixelBuffer) -> QImage:
    """Return a deep-copied ``Format_ARGB32`` :class:`QImage` of *buffer*.

    ``Format_ARGB32`` stores each pixel as a native-endian ``0xAARRGGBB``
    integer, which is exactly the in-memory layout of the buffer, so the raw
    bytes are handed to Qt without any channel shuffling.  The final
    ``copy()`` detaches the image from the temporary byte string.
    """

    data = np.ascontiguousarray(buffer.pixels).tobytes()
    image = QImage(
        data,
        buffer.width,
        buffer.height,
        buffer.width * 4,
        QImage.Format.Format_ARGB32,
    )
    return image.copy()


__all__ = ["buffer_to_qimage"]
