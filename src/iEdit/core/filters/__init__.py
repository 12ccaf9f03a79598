"""Per-pixel image filters.

The package keeps a clean separation of concerns:
- algorithms: scalar formulas and ARGB packing helpers
- executors: vectorised NumPy path and a per-pixel fallback
- facade: the public dispatch entry point
"""

from __future__ import annotations

from .facade import FilterKind, apply_filter, grayscale, invert

__all__ = ["FilterKind", "apply_filter", "grayscale", "invert"]
