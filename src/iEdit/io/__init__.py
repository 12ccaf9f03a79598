"""Image file input/output."""

from __future__ import annotations

from .codec import decode, encode, load_image, save_image

__all__ = ["decode", "encode", "load_image", "save_image"]
