"""Application bootstrap for the iEdit desktop editor."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from .. import __version__
from ..config import APP_NAME
from ..utils.logging import logger, set_level


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iedit",
        description="View an image and apply invert or grayscale filters.",
    )
    parser.add_argument("image", nargs="?", type=Path, help="image to open at start-up")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="logging verbosity (default: info)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch the editor window and run the Qt event loop."""

    args = _build_parser().parse_args(argv)
    set_level(args.log_level)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName(APP_NAME)

    # Imported lazily so ``--help`` works without initialising any widgets.
    from .ui.main_window import MainWindow

    window = MainWindow()
    window.show()
    if args.image is not None:
        logger.info("Opening %s from the command line", args.image)
        window.controller.load_image(args.image)
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - manual launch
    sys.exit(main())
