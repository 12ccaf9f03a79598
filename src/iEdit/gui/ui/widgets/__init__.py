"""Reusable Qt widgets for the iEdit GUI."""

from .chrome_status_bar import ChromeStatusBar
from .image_viewer import ImageViewer

__all__ = ["ChromeStatusBar", "ImageViewer"]
