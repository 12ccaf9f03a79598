"""Edit session holding the loaded original and the working copy."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Optional

from ..errors import NoImageLoadedError
from ..utils.logging import logger
from .filters import FilterKind, apply_filter
from .pixel_buffer import PixelBuffer


class SessionState(enum.Enum):
    EMPTY = "empty"
    LOADED = "loaded"


class EditSession:
    """Track the ``original`` snapshot and the ``current`` working buffer.

    The session starts :attr:`SessionState.EMPTY`.  :meth:`load` moves it to
    :attr:`SessionState.LOADED`, after which filters mutate ``current`` only.
    ``original`` is frozen on load and never handed out for mutation.

    The session is not thread-safe; its owner (normally the GUI controller)
    must serialise every call.
    """

    def __init__(self) -> None:
        self._original: Optional[PixelBuffer] = None
        self._current: Optional[PixelBuffer] = None
        self._source: Optional[Path] = None

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------
    @property
    def state(self) -> SessionState:
        if self._original is None:
            return SessionState.EMPTY
        return SessionState.LOADED

    @property
    def has_image(self) -> bool:
        """``True`` once an image has been loaded."""

        return self._original is not None

    @property
    def source(self) -> Optional[Path]:
        """Path the current image was loaded from, when known."""

        return self._source

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def load(self, buffer: PixelBuffer, *, source: Optional[Path | str] = None) -> None:
        """Adopt *buffer* as the new original and start a fresh working copy.

        The session takes ownership of *buffer* and freezes it; callers must
        not keep mutating it afterwards.
        """

        if not isinstance(buffer, PixelBuffer):
            raise TypeError(f"Expected PixelBuffer, got {type(buffer).__name__}")
        current = buffer.copy()
        buffer.freeze()
        self._original = buffer
        self._current = current
        self._source = Path(source) if source is not None else None
        logger.debug("Session loaded %r from %s", buffer, self._source or "<memory>")

    def reset_to_original(self) -> None:
        """Discard every edit and restore ``current`` from the snapshot."""

        original = self._require_original()
        self._current = original.copy()
        logger.debug("Session restored to original")

    def apply_filter(self, kind: FilterKind) -> None:
        """Apply the filter *kind* to the working buffer in place."""

        current = self._require_current()
        apply_filter(current, kind)
        logger.debug("Session applied %s", FilterKind(kind).label)

    def get_current(self) -> PixelBuffer:
        """Return the working buffer for rendering."""

        return self._require_current()

    # ------------------------------------------------------------------
    # Helpers for the shell
    # ------------------------------------------------------------------
    def snapshot(self) -> PixelBuffer:
        """Return an independent copy of the working buffer, e.g. for saving."""

        return self._require_current().copy()

    def is_modified(self) -> bool:
        """Return ``True`` when the working buffer differs from the original."""

        return self._require_current() != self._require_original()

    def _require_original(self) -> PixelBuffer:
        if self._original is None:
            raise NoImageLoadedError("No image loaded")
        return self._original

    def _require_current(self) -> PixelBuffer:
        if self._current is None:
            raise NoImageLoadedError("No image loaded")
        return self._current


__all__ = ["EditSession", "SessionState"]
