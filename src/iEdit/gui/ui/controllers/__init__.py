"""Controllers mediating between widgets and the edit session."""

from .edit_controller import EditController

__all__ = ["EditController"]
