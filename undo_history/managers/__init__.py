"""Qt integration helpers for undo_history."""

from .qt_bridge import QtHistoryBridge

__all__ = ["QtHistoryBridge"]
