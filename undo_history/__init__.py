"""Linear undo/redo command history."""

from .actions import CallbackAction, ReversibleAction
from .controllers import (
    InvalidActionError,
    RedoUnavailableError,
    UndoRedoManager,
    UndoUnavailableError,
)
from .logging_setup import configure_logging

__all__ = [
    "CallbackAction",
    "ReversibleAction",
    "UndoRedoManager",
    "InvalidActionError",
    "UndoUnavailableError",
    "RedoUnavailableError",
    "configure_logging",
]
