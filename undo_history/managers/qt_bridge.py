# managers/qt_bridge.py
"""
QtHistoryBridge: republishes UndoRedoManager state as Qt signals so menu items
and toolbar buttons can follow the undo/redo availability.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot
from PySide6.QtGui import QAction, QKeySequence

from .. import config
from ..controllers import UndoRedoManager

logger = logging.getLogger(__name__)


class QtHistoryBridge(QObject):
    """Qt facade over an :class:`UndoRedoManager`."""

    can_undo_changed = Signal(bool)
    can_redo_changed = Signal(bool)
    history_changed = Signal()

    def __init__(self, manager: UndoRedoManager, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.manager = manager
        self._can_undo = manager.can_undo
        self._can_redo = manager.can_redo
        self._attached = True
        listener = self._on_history_changed
        manager.add_listener(listener)
        # Runs after the C++ object is gone; touches only the manager.
        self.destroyed.connect(lambda *_: manager.remove_listener(listener))

    @property
    def can_undo(self) -> bool:
        return self.manager.can_undo

    @property
    def can_redo(self) -> bool:
        return self.manager.can_redo

    def _on_history_changed(self) -> None:
        can_undo = self.manager.can_undo
        can_redo = self.manager.can_redo
        if can_undo != self._can_undo:
            self._can_undo = can_undo
            self.can_undo_changed.emit(can_undo)
        if can_redo != self._can_redo:
            self._can_redo = can_redo
            self.can_redo_changed.emit(can_redo)
        self.history_changed.emit()

    # --- Slots, safe to wire to unconditional shortcuts ---

    @Slot()
    def undo(self) -> None:
        self.manager.undo()

    @Slot()
    def redo(self) -> None:
        self.manager.redo()

    @Slot()
    def undo_all(self) -> None:
        self.manager.undo_all()

    @Slot()
    def redo_all(self) -> None:
        self.manager.redo_all()

    def bind_actions(self, undo_action: QAction, redo_action: QAction) -> None:
        """Wire *undo_action* and *redo_action* to the managed history.

        Shortcuts come from :mod:`undo_history.config`; ``enabled`` follows
        :attr:`can_undo` / :attr:`can_redo` from now on.
        """
        undo_action.setShortcut(
            QKeySequence(getattr(QKeySequence.StandardKey, config.UNDO_SHORTCUT))
        )
        redo_action.setShortcut(
            QKeySequence(getattr(QKeySequence.StandardKey, config.REDO_SHORTCUT))
        )
        undo_action.triggered.connect(self.undo)
        redo_action.triggered.connect(self.redo)

        undo_action.setEnabled(self.manager.can_undo)
        redo_action.setEnabled(self.manager.can_redo)
        self.can_undo_changed.connect(undo_action.setEnabled)
        self.can_redo_changed.connect(redo_action.setEnabled)
        logger.debug("Bound QActions %r / %r", undo_action.text(), redo_action.text())

    def detach(self) -> None:
        """Stop observing the manager."""
        if self._attached:
            self.manager.remove_listener(self._on_history_changed)
            self._attached = False
