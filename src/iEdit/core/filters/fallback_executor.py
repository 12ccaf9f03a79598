"""Fallback filter executor that walks the buffer one pixel at a time.

It only relies on :meth:`PixelBuffer.get_pixel` and
:meth:`PixelBuffer.set_pixel`, which makes it slow but independent of the
buffer's storage layout.  The vectorised executor must match it bit for bit.
"""

from __future__ import annotations

from typing import Callable

from ..pixel_buffer import PixelBuffer
from .algorithms import grayscale_pixel, invert_pixel


def _apply_per_pixel(buffer: PixelBuffer, transform: Callable[[int], int]) -> None:
    width = buffer.width
    height = buffer.height
    for y in range(height):
        for x in range(width):
            buffer.set_pixel(x, y, transform(buffer.get_pixel(x, y)))


def invert_per_pixel(buffer: PixelBuffer) -> None:
    """Slow but layout-agnostic colour inversion."""

    _apply_per_pixel(buffer, invert_pixel)


def grayscale_per_pixel(buffer: PixelBuffer) -> None:
    """Slow but layout-agnostic grayscale conversion."""

    _apply_per_pixel(buffer, grayscale_pixel)


__all__ = ["grayscale_per_pixel", "invert_per_pixel"]
