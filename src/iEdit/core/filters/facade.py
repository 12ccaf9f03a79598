"""Dispatch filter requests to the vectorised or fallback executor."""

from __future__ import annotations

import enum
from typing import Callable, Dict, Tuple

from ...utils.logging import logger
from ..pixel_buffer import PixelBuffer
from .fallback_executor import grayscale_per_pixel, invert_per_pixel
from .numpy_executor import grayscale_vectorized, invert_vectorized


class FilterKind(enum.Enum):
    """The fixed set of per-pixel filters offered by the editor."""

    INVERT = "invert"
    GRAYSCALE = "grayscale"

    @property
    def label(self) -> str:
        """Human readable name used in status messages."""

        return _LABELS[self]


_LABELS: Dict[FilterKind, str] = {
    FilterKind.INVERT: "invert",
    FilterKind.GRAYSCALE: "grayscale",
}

_EXECUTORS: Dict[FilterKind, Tuple[Callable[[PixelBuffer], bool], Callable[[PixelBuffer], None]]] = {
    FilterKind.INVERT: (invert_vectorized, invert_per_pixel),
    FilterKind.GRAYSCALE: (grayscale_vectorized, grayscale_per_pixel),
}


def apply_filter(buffer: PixelBuffer, kind: FilterKind, *, vectorized: bool = True) -> None:
    """Apply the filter *kind* to *buffer* in place.

    The vectorised executor runs first unless *vectorized* is ``False``; if it
    reports that it cannot handle the buffer, the per-pixel fallback is used.
    Frozen buffers are rejected before any pixel is touched.
    """

    kind = FilterKind(kind)
    buffer.ensure_writable()
    fast_path, slow_path = _EXECUTORS[kind]
    if vectorized and fast_path(buffer):
        return
    if vectorized:
        logger.debug("Vectorised %s unavailable; using per-pixel fallback", kind.label)
    slow_path(buffer)


def invert(buffer: PixelBuffer) -> None:
    """Invert the colour channels of *buffer* in place, keeping alpha."""

    apply_filter(buffer, FilterKind.INVERT)


def grayscale(buffer: PixelBuffer) -> None:
    """Convert *buffer* to grayscale in place, keeping alpha."""

    apply_filter(buffer, FilterKind.GRAYSCALE)


__all__ = ["FilterKind", "apply_filter", "grayscale", "invert"]
