"""Exception hierarchy shared by the iEdit core, codec and GUI layers."""

from __future__ import annotations


class IEditError(Exception):
    """Base class for every recoverable iEdit failure."""


class InvalidDimensionError(IEditError, ValueError):
    """Raised when a pixel buffer is requested with a non-positive size."""


class OutOfRangeError(IEditError, IndexError):
    """Raised when a pixel coordinate falls outside the buffer bounds."""


class InvalidPixelValueError(IEditError, ValueError):
    """Raised when a packed ARGB value does not fit in 32 unsigned bits."""


class ReadOnlyBufferError(IEditError):
    """Raised when mutating a buffer that has been frozen as a snapshot."""


class NoImageLoadedError(IEditError):
    """Raised when an edit operation runs before any image was loaded."""


class CodecError(IEditError):
    """Base class for image decode/encode failures."""


class DecodeError(CodecError):
    """The input could not be decoded into a pixel buffer."""


class EncodeError(CodecError):
    """The pixel buffer could not be encoded or written to disk."""


__all__ = [
    "CodecError",
    "DecodeError",
    "EncodeError",
    "IEditError",
    "InvalidDimensionError",
    "InvalidPixelValueError",
    "NoImageLoadedError",
    "OutOfRangeError",
    "ReadOnlyBufferError",
]
