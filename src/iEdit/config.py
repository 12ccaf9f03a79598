"""Application-wide constants for iEdit."""

from __future__ import annotations

APP_NAME = "iEdit"
WINDOW_TITLE = "Professional Image Editor"
WINDOW_SIZE = (900, 700)
VIEWER_FIT_SIZE = (800, 600)

# --- Codec ------------------------------------------------------------------
SUPPORTED_INPUT_FORMATS = frozenset({"PNG", "JPEG"})
SUPPORTED_INPUT_SUFFIXES = (".png", ".jpg", ".jpeg")
OUTPUT_FORMAT = "PNG"
OUTPUT_SUFFIX = ".png"

# --- File dialogs -----------------------------------------------------------
OPEN_DIALOG_CAPTION = "Open Image"
OPEN_DIALOG_FILTER = "Image Files (*.png *.jpg *.jpeg)"
SAVE_DIALOG_CAPTION = "Save Image"
SAVE_DIALOG_FILTER = "PNG Files (*.png)"

# --- Viewer -----------------------------------------------------------------
MIN_ZOOM = 0.1
MAX_ZOOM = 4.0
ZOOM_STEP = 0.1

# --- Status bar messages ----------------------------------------------------
STATUS_READY = "Ready to edit..."
STATUS_LOADED = "Image loaded successfully: {name}"
STATUS_LOAD_FAILED = "Error loading image: {reason}"
STATUS_RESTORED = "Image restored to original."
STATUS_INVERTED = "Invert colors applied."
STATUS_GRAYSCALE = "Grayscale filter applied."
STATUS_SAVED = "Image saved successfully to {path}"
STATUS_SAVE_FAILED = "Error saving image: {reason}"
STATUS_NO_ORIGINAL = "No original image to restore."
STATUS_NO_IMAGE_INVERT = "No image loaded to invert."
STATUS_NO_IMAGE_GRAYSCALE = "No image loaded to apply grayscale."
STATUS_NO_IMAGE_SAVE = "No image to save."
