"""Scalar per-pixel formulas shared by every filter executor.

The vectorised executor must produce exactly the values these helpers return,
so they double as the reference implementation in tests.
"""

from __future__ import annotations

from typing import Tuple

# BT.601 luma weights expressed in thousandths so the floor is computed
# exactly with integers.  Floating point evaluation of
# ``0.299 * v + 0.587 * v + 0.114 * v`` lands just below ``v`` for many grey
# levels, which would make the filter drift on repeated application.
LUMA_WEIGHTS_PERMILLE: Tuple[int, int, int] = (299, 587, 114)
LUMA_SCALE = 1000


def unpack_argb(value: int) -> Tuple[int, int, int, int]:
    """Split a packed ``0xAARRGGBB`` value into ``(a, r, g, b)``."""

    return (
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def pack_argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Combine four 8-bit channels into a packed ``0xAARRGGBB`` value."""

    return (
        ((alpha & 0xFF) << 24)
        | ((red & 0xFF) << 16)
        | ((green & 0xFF) << 8)
        | (blue & 0xFF)
    )


def luminance(red: int, green: int, blue: int) -> int:
    """Return ``floor(0.299 r + 0.587 g + 0.114 b)`` for 8-bit channels."""

    wr, wg, wb = LUMA_WEIGHTS_PERMILLE
    return (wr * red + wg * green + wb * blue) // LUMA_SCALE


def invert_pixel(value: int) -> int:
    """Return *value* with its colour channels inverted and alpha kept."""

    alpha, red, green, blue = unpack_argb(value)
    return pack_argb(alpha, 255 - red, 255 - green, 255 - blue)


def grayscale_pixel(value: int) -> int:
    """Return *value* with every colour channel replaced by its luminance."""

    alpha, red, green, blue = unpack_argb(value)
    gray = luminance(red, green, blue)
    return pack_argb(alpha, gray, gray, gray)
