"""Owned, mutable grid of packed ARGB pixels.

Every pixel is a single unsigned 32-bit integer laid out as ``0xAARRGGBB``.
The grid is stored as a C-contiguous ``(height, width)`` NumPy array, so the
flattened order is row-major and matches ``QImage.Format_ARGB32`` on
little-endian hosts.
"""

from __future__ import annotations

import numbers

import numpy as np

from ..errors import (
    InvalidDimensionError,
    InvalidPixelValueError,
    OutOfRangeError,
    ReadOnlyBufferError,
)

MAX_PIXEL_VALUE = 0xFFFFFFFF


def _validate_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensionError(f"{name} must be positive, got {value}")
    return int(value)


class PixelBuffer:
    """A ``width`` x ``height`` grid of packed ARGB values."""

    __slots__ = ("_pixels",)

    def __init__(self, pixels: np.ndarray) -> None:
        # Callers go through ``create``/``from_array``/``copy``; the constructor
        # trusts that *pixels* is an owned, 2-D ``uint32`` array.
        self._pixels = pixels

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def create(cls, width: int, height: int) -> "PixelBuffer":
        """Return a zero-initialised buffer of the requested size."""

        width = _validate_dimension("width", width)
        height = _validate_dimension("height", height)
        return cls(np.zeros((height, width), dtype=np.uint32))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelBuffer":
        """Wrap a copy of the 2-D integer *array* of packed ARGB values."""

        source = np.asarray(array)
        if source.ndim != 2 or source.size == 0:
            raise InvalidDimensionError(
                f"Expected a non-empty 2-D array, got shape {source.shape}"
            )
        if source.dtype != np.uint32:
            if not np.issubdtype(source.dtype, np.integer):
                raise InvalidPixelValueError(f"Unsupported pixel dtype {source.dtype}")
            if source.min() < 0 or source.max() > MAX_PIXEL_VALUE:
                raise InvalidPixelValueError("Pixel values must fit in 32 unsigned bits")
        return cls(np.array(source, dtype=np.uint32, order="C", copy=True))

    def copy(self) -> "PixelBuffer":
        """Return an independent, writable copy of this buffer."""

        return PixelBuffer(self._pixels.copy())

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> int:
        """Number of pixels, always ``width * height``."""

        return int(self._pixels.size)

    @property
    def pixels(self) -> np.ndarray:
        """The underlying ``(height, width)`` ``uint32`` array.

        Filter executors and the codec operate on this array directly.  A
        frozen buffer exposes a read-only array.
        """

        return self._pixels

    # ------------------------------------------------------------------
    # Snapshot support
    # ------------------------------------------------------------------
    def freeze(self) -> None:
        """Mark the buffer read-only so it can serve as a snapshot."""

        self._pixels.flags.writeable = False

    @property
    def frozen(self) -> bool:
        return not self._pixels.flags.writeable

    def ensure_writable(self) -> None:
        """Raise :class:`ReadOnlyBufferError` if the buffer is frozen."""

        if self.frozen:
            raise ReadOnlyBufferError("Cannot modify a frozen pixel buffer")

    # ------------------------------------------------------------------
    # Pixel access
    # ------------------------------------------------------------------
    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRangeError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer"
            )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the packed ARGB value stored at column *x*, row *y*."""

        self._check_bounds(x, y)
        return int(self._pixels[y, x])

    def set_pixel(self, x: int, y: int, value: int) -> None:
        """Store the packed ARGB *value* at column *x*, row *y*."""

        self._check_bounds(x, y)
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidPixelValueError(f"Pixel value must be an integer, got {value!r}")
        if not 0 <= value <= MAX_PIXEL_VALUE:
            raise InvalidPixelValueError(f"Pixel value {value:#x} does not fit in 32 bits")
        self.ensure_writable()
        self._pixels[y, x] = value

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self._pixels.shape == other._pixels.shape and bool(
            np.array_equal(self._pixels, other._pixels)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = ", frozen" if self.frozen else ""
        return f"PixelBuffer({self.width}x{self.height}{state})"


__all__ = ["MAX_PIXEL_VALUE", "PixelBuffer"]
