import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make the package importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from iEdit.core.filters.algorithms import pack_argb  # noqa: E402
from iEdit.core.pixel_buffer import PixelBuffer  # noqa: E402


@pytest.fixture
def sample_buffer() -> PixelBuffer:
    """The 2x1 image used throughout the filter scenarios."""

    buffer = PixelBuffer.create(2, 1)
    buffer.set_pixel(0, 0, pack_argb(255, 10, 20, 30))
    buffer.set_pixel(1, 0, pack_argb(128, 200, 150, 100))
    return buffer


@pytest.fixture(scope="session")
def qapp():
    """Shared offscreen ``QApplication`` for widget and controller tests."""

    pytest.importorskip("PySide6", reason="PySide6 is required for GUI tests", exc_type=ImportError)
    pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
