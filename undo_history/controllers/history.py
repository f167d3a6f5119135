"""Linear undo/redo history for already executed actions.

This module provides :class:`UndoRedoManager`, a small service that keeps an
ordered log of reversible actions and a cursor into it.  Entries before the
cursor are applied; entries after it were undone and can be redone.  The
manager never executes an action itself: callers perform the forward effect
and then register the action, after which the manager only calls ``undo()``
and ``redo()``.

Registering a new action after one or more undos discards every pending redo
entry, so the history is always a line and never a tree.  Undo and redo at
the ends of the log are no-ops because UI callers invoke them unconditionally
from menu items and keyboard shortcuts; pass ``strict=True`` to get
:class:`UndoUnavailableError` / :class:`RedoUnavailableError` instead.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from ..actions import SupportsUndoRedo
from ..validation import InvalidActionError, require_action

logger = logging.getLogger(__name__)


class UndoUnavailableError(RuntimeError):
    """Raised when a strict undo is requested with no applied history."""


class RedoUnavailableError(RuntimeError):
    """Raised when a strict redo is requested with no pending history."""


def _describe(action: SupportsUndoRedo) -> str:
    return getattr(action, "description", "") or type(action).__name__


class UndoRedoManager:
    """Manage a linear log of reversible actions and a cursor into it."""

    def __init__(self) -> None:
        self._entries: List[SupportsUndoRedo] = []
        self._cursor = 0
        self._listeners: List[Callable[[], None]] = []

    # --- State queries ---

    @property
    def can_undo(self) -> bool:
        """Return whether at least one applied action can be undone."""

        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        """Return whether at least one undone action can be redone."""

        return self._cursor < len(self._entries)

    @property
    def undo_count(self) -> int:
        return self._cursor

    @property
    def redo_count(self) -> int:
        return len(self._entries) - self._cursor

    @property
    def undo_description(self) -> Optional[str]:
        """Describe the action the next :meth:`undo` would reverse."""

        if not self.can_undo:
            return None
        return _describe(self._entries[self._cursor - 1])

    @property
    def redo_description(self) -> Optional[str]:
        """Describe the action the next :meth:`redo` would reapply."""

        if not self.can_redo:
            return None
        return _describe(self._entries[self._cursor])

    def __len__(self) -> int:
        return len(self._entries)

    # --- Listeners ---

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Call *callback* after every change to the log or the cursor."""

        if not callable(callback):
            raise TypeError("callback must be callable")
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]) -> None:
        """Stop notifying *callback*; unknown callbacks are ignored."""

        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()

    # --- Mutations ---

    def register_executed_action(self, action: Any) -> None:
        """Record an action whose forward effect the caller already performed.

        Any undone actions still waiting to be redone are discarded.  The
        action's ``undo``/``redo`` methods are not called.
        """

        try:
            require_action(action)
        except InvalidActionError:
            logger.warning("Rejected invalid action: %r", action)
            raise

        dropped = len(self._entries) - self._cursor
        del self._entries[self._cursor:]
        self._entries.append(action)
        self._cursor = len(self._entries)
        logger.debug(
            "Registered %s (cursor=%d, dropped %d redo entries)",
            _describe(action),
            self._cursor,
            dropped,
        )
        self._notify()

    def undo(self, *, strict: bool = False) -> bool:
        """Undo the most recently applied action.

        Returns ``True`` when a step was taken.  With nothing to undo the call
        is a no-op returning ``False``, or raises
        :class:`UndoUnavailableError` when *strict* is set.
        """

        if not self.can_undo:
            if strict:
                raise UndoUnavailableError("No undo history is available")
            logger.debug("Undo requested with nothing to undo")
            return False

        self._cursor -= 1
        action = self._entries[self._cursor]
        try:
            action.undo()
        except Exception:
            self._cursor += 1
            raise
        logger.debug("Undid %s (cursor=%d)", _describe(action), self._cursor)
        self._notify()
        return True

    def undo_all(self) -> int:
        """Undo every applied action, newest first, and return the count."""

        steps = 0
        while self.undo():
            steps += 1
        return steps

    def redo(self, *, strict: bool = False) -> bool:
        """Redo the oldest pending action.

        Mirrors :meth:`undo`: ``False`` (or :class:`RedoUnavailableError`
        with *strict*) when nothing is pending.
        """

        if not self.can_redo:
            if strict:
                raise RedoUnavailableError("No redo history is available")
            logger.debug("Redo requested with nothing to redo")
            return False

        action = self._entries[self._cursor]
        action.redo()
        self._cursor += 1
        logger.debug("Redid %s (cursor=%d)", _describe(action), self._cursor)
        self._notify()
        return True

    def redo_all(self) -> int:
        """Redo every pending action, oldest first, and return the count."""

        steps = 0
        while self.redo():
            steps += 1
        return steps

    def clear(self) -> None:
        """Forget the whole history without invoking any action."""

        self._entries.clear()
        self._cursor = 0
        logger.debug("History cleared")
        self._notify()
