"""Core image-editing model: pixel buffers, filters and the edit session."""

from __future__ import annotations

from .filters import FilterKind, apply_filter, grayscale, invert
from .pixel_buffer import PixelBuffer
from .session import EditSession, SessionState

__all__ = [
    "EditSession",
    "FilterKind",
    "PixelBuffer",
    "SessionState",
    "apply_filter",
    "grayscale",
    "invert",
]
