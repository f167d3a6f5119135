"""Controller layer holding the undo/redo history independently of any UI."""

from ..validation import InvalidActionError
from .history import (
    RedoUnavailableError,
    UndoRedoManager,
    UndoUnavailableError,
)

__all__ = [
    "UndoRedoManager",
    "InvalidActionError",
    "UndoUnavailableError",
    "RedoUnavailableError",
]
