"""Shared colours and stylesheets for the Qt GUI layer."""

from __future__ import annotations

# --- Window chrome ----------------------------------------------------------
WINDOW_BACKGROUND_HEX = "#2e2e2e"
TOOLBAR_BACKGROUND_HEX = "#3e3e3e"
VIEWER_BACKGROUND_HEX = "#1a1a1a"
VIEWER_BORDER_HEX = "#444444"
STATUS_TEXT_HEX = "#aaaaaa"

# --- Toolbar buttons --------------------------------------------------------
BUTTON_BACKGROUND_HEX = "#555555"
BUTTON_HOVER_HEX = "#777777"
BUTTON_BORDER_HEX = "#888888"
BUTTON_DISABLED_TEXT_HEX = "#8a8a8a"

WINDOW_STYLESHEET = f"QMainWindow {{ background-color: {WINDOW_BACKGROUND_HEX}; }}"

TOOLBAR_STYLESHEET = (
    f"QWidget#editToolbar {{ background-color: {TOOLBAR_BACKGROUND_HEX}; }}"
    "QPushButton {"
    f" background-color: {BUTTON_BACKGROUND_HEX};"
    " color: white;"
    " font-size: 14px;"
    " padding: 8px 16px;"
    " border-radius: 5px;"
    f" border: 1px solid {BUTTON_BORDER_HEX};"
    " }"
    f"QPushButton:hover {{ background-color: {BUTTON_HOVER_HEX}; }}"
    f"QPushButton:disabled {{ color: {BUTTON_DISABLED_TEXT_HEX}; }}"
)

VIEWER_FRAME_STYLESHEET = (
    f"QFrame#viewerFrame {{ background-color: {VIEWER_BACKGROUND_HEX};"
    f" border: 2px solid {VIEWER_BORDER_HEX}; }}"
)

STATUS_BAR_STYLESHEET = (
    f"QWidget#chromeStatusBar {{ background-color: {TOOLBAR_BACKGROUND_HEX}; }}"
    f"QLabel#statusMessageLabel {{ color: {STATUS_TEXT_HEX}; font-size: 12px; }}"
)


__all__ = [
    "STATUS_BAR_STYLESHEET",
    "TOOLBAR_STYLESHEET",
    "VIEWER_BACKGROUND_HEX",
    "VIEWER_FRAME_STYLESHEET",
    "WINDOW_STYLESHEET",
]
