"""Allow ``python -m iEdit`` to launch the desktop editor."""

from __future__ import annotations

import sys

from .gui.main import main

if __name__ == "__main__":
    sys.exit(main())
