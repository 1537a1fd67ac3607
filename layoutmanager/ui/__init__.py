"""User interface for layoutmanager."""

from .preview_window import PreviewWindow

__all__ = ["PreviewWindow"]
