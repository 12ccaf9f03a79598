"""iEdit: a small desktop image viewer with invert and grayscale filters."""

from __future__ import annotations

from .core import EditSession, FilterKind, PixelBuffer, SessionState, apply_filter
from .errors import (
    DecodeError,
    EncodeError,
    IEditError,
    InvalidDimensionError,
    NoImageLoadedError,
    OutOfRangeError,
)

__version__ = "1.0.0"

__all__ = [
    "DecodeError",
    "EditSession",
    "EncodeError",
    "FilterKind",
    "IEditError",
    "InvalidDimensionError",
    "NoImageLoadedError",
    "OutOfRangeError",
    "PixelBuffer",
    "SessionState",
    "apply_filter",
]
