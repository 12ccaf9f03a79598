"""NumPy vectorised executor for the invert and grayscale filters.

Both passes operate directly on the packed ``uint32`` array, so a full-size
photo is processed with a handful of array operations instead of a Python
loop per pixel.
"""

from __future__ import annotations

import numpy as np

from ..pixel_buffer import PixelBuffer
from .algorithms import LUMA_SCALE, LUMA_WEIGHTS_PERMILLE

_ALPHA_MASK = np.uint32(0xFF000000)
_RGB_MASK = np.uint32(0x00FFFFFF)


def _writable_view(buffer: PixelBuffer) -> np.ndarray | None:
    pixels = buffer.pixels
    if not pixels.flags.writeable or not pixels.flags.c_contiguous:
        return None
    return pixels


def invert_vectorized(buffer: PixelBuffer) -> bool:
    """Invert the colour channels of *buffer* in place.

    ``255 - c`` for every 8-bit channel is the same as flipping all RGB bits,
    so an XOR with ``0x00FFFFFF`` handles the three channels at once and
    leaves alpha untouched.  Returns ``False`` when the buffer cannot be
    modified through NumPy and the caller should fall back.
    """

    pixels = _writable_view(buffer)
    if pixels is None:
        return False
    if pixels.size == 0:
        return True
    np.bitwise_xor(pixels, _RGB_MASK, out=pixels)
    return True


def grayscale_vectorized(buffer: PixelBuffer) -> bool:
    """Replace every colour channel of *buffer* with its luminance in place.

    Returns ``False`` when the buffer cannot be modified through NumPy.
    """

    pixels = _writable_view(buffer)
    if pixels is None:
        return False
    if pixels.size == 0:
        return True

    # Widen to 64-bit so the weighted sum never overflows.
    wide = pixels.astype(np.uint64)
    red = (wide >> 16) & 0xFF
    green = (wide >> 8) & 0xFF
    blue = wide & 0xFF

    wr, wg, wb = LUMA_WEIGHTS_PERMILLE
    gray = (red * wr + green * wg + blue * wb) // LUMA_SCALE
    gray_rgb = (gray << 16) | (gray << 8) | gray

    alpha = pixels & _ALPHA_MASK
    np.bitwise_or(alpha, gray_rgb.astype(np.uint32), out=pixels)
    return True


__all__ = ["grayscale_vectorized", "invert_vectorized"]
