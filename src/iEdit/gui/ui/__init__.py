"""Qt widgets, controllers and the main window."""
