"""Linepad - a minimal terminal text editor."""

__version__ = "0.1.0"

from .state import EditorState, CursorPosition, Viewport

__all__ = [
    'EditorState',
    'CursorPosition',
    'Viewport',
]
