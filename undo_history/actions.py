"""
Reversible actions recorded by :class:`~undo_history.controllers.UndoRedoManager`.

An action is registered only after its forward effect has been performed, so
the interface has no ``execute`` step: the manager calls ``undo()`` to
reverse the effect and ``redo()`` to reapply it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Protocol


class SupportsUndoRedo(Protocol):
    """Structural type accepted by the manager; subclassing is optional."""

    def undo(self) -> None: ...

    def redo(self) -> None: ...


class ReversibleAction(ABC):
    """Base class for actions that can be undone and redone."""

    description: str = ""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the effect of the action."""

    @abstractmethod
    def redo(self) -> None:
        """Reapply the effect of the action after an undo."""


@dataclass(frozen=True)
class CallbackAction(ReversibleAction):
    """Adapter building an action from two callables."""

    undo_callback: Callable[[], None]
    redo_callback: Callable[[], None]
    description: str = ""

    def undo(self) -> None:
        self.undo_callback()

    def redo(self) -> None:
        self.redo_callback()
