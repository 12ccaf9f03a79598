from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for the entry point", exc_type=ImportError)

from iEdit.gui import main as entry
from iEdit.utils.logging import get_logger, set_level


def test_parser_accepts_image_and_log_level():
    args = entry._build_parser().parse_args(["photo.jpg", "--log-level", "debug"])
    assert args.image == Path("photo.jpg")
    assert args.log_level == "debug"


def test_parser_defaults():
    args = entry._build_parser().parse_args([])
    assert args.image is None
    assert args.log_level == "info"


def test_set_level_accepts_names_and_rejects_unknown():
    logger = get_logger()
    previous = logger.level
    try:
        set_level("warning")
        assert logger.level == 30
        with pytest.raises(ValueError):
            set_level("chatty")
    finally:
        logger.setLevel(previous)
