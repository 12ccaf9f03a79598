"""Pillow-backed conversion between image files and :class:`PixelBuffer`."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
from PIL import Image, JpegImagePlugin, UnidentifiedImageError

from ..config import OUTPUT_FORMAT, OUTPUT_SUFFIX, SUPPORTED_INPUT_FORMATS
from ..core.pixel_buffer import PixelBuffer
from ..errors import DecodeError, EncodeError, InvalidDimensionError
from ..utils.fileio import atomic_write_bytes
from ..utils.logging import logger


def _rgba_to_argb(rgba: np.ndarray) -> np.ndarray:
    """Pack an ``(H, W, 4)`` ``uint8`` RGBA array into ``uint32`` ARGB."""

    channels = rgba.astype(np.uint32)
    return (
        (channels[..., 3] << 24)
        | (channels[..., 0] << 16)
        | (channels[..., 1] << 8)
        | channels[..., 2]
    )


def _argb_to_rgba(argb: np.ndarray) -> np.ndarray:
    """Unpack a ``uint32`` ARGB array into an ``(H, W, 4)`` RGBA array."""

    rgba = np.empty(argb.shape + (4,), dtype=np.uint8)
    rgba[..., 0] = (argb >> 16) & 0xFF
    rgba[..., 1] = (argb >> 8) & 0xFF
    rgba[..., 2] = argb & 0xFF
    rgba[..., 3] = (argb >> 24) & 0xFF
    return rgba


def decode(data: bytes) -> PixelBuffer:
    """Decode PNG or JPEG *data* into a new :class:`PixelBuffer`."""

    try:
        with Image.open(io.BytesIO(data)) as image:
            # Phone and camera JPEGs often carry extra frames and open as
            # "MPO"; they are still JPEG files and only the first frame is used.
            is_jpeg = isinstance(image, JpegImagePlugin.JpegImageFile)
            if image.format not in SUPPORTED_INPUT_FORMATS and not is_jpeg:
                raise DecodeError(f"Unsupported image format: {image.format or 'unknown'}")
            # ``convert`` forces the lazy decoder to read the full payload,
            # which is where truncated files surface.
            rgba = np.asarray(image.convert("RGBA"))
    except DecodeError:
        raise
    except UnidentifiedImageError as exc:
        raise DecodeError("Could not read image file.") from exc
    except (OSError, EOFError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Corrupt image data: {exc}") from exc

    try:
        return PixelBuffer.from_array(_rgba_to_argb(rgba))
    except InvalidDimensionError as exc:
        raise DecodeError(f"Image has no pixels: {exc}") from exc


def encode(buffer: PixelBuffer, fmt: str = OUTPUT_FORMAT) -> bytes:
    """Encode *buffer* as *fmt* (only PNG is supported) and return the bytes."""

    if fmt.upper() != OUTPUT_FORMAT:
        raise EncodeError(f"Unsupported output format: {fmt}")
    rgba = _argb_to_rgba(buffer.pixels)
    stream = io.BytesIO()
    try:
        Image.fromarray(rgba).save(stream, format=OUTPUT_FORMAT)
    except (OSError, ValueError) as exc:
        raise EncodeError(f"Could not encode image: {exc}") from exc
    return stream.getvalue()


def load_image(path: Path | str) -> PixelBuffer:
    """Read and decode the image stored at *path*."""

    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DecodeError(f"Could not read {path.name}: {exc.strerror or exc}") from exc
    buffer = decode(data)
    logger.info("Loaded %s (%dx%d)", path, buffer.width, buffer.height)
    return buffer


def save_image(buffer: PixelBuffer, path: Path | str) -> Path:
    """Encode *buffer* as PNG and write it to *path*.

    A ``.png`` suffix is appended when *path* has none.  Returns the path that
    was actually written.
    """

    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(OUTPUT_SUFFIX)
    payload = encode(buffer)
    try:
        atomic_write_bytes(path, payload)
    except OSError as exc:
        raise EncodeError(f"Could not write {path}: {exc.strerror or exc}") from exc
    logger.info("Saved %s (%dx%d)", path, buffer.width, buffer.height)
    return path


__all__ = ["decode", "encode", "load_image", "save_image"]
