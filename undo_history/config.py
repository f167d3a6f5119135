# config.py
"""
Library configuration constants for undo_history
"""

# Logging
LOGGER_NAME = "undo_history"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_FILE_NAME = "undo_history.log"
LOG_MAX_BYTES = 1_048_576
LOG_BACKUP_COUNT = 5

# Keyboard shortcuts bound by the Qt bridge (QKeySequence.StandardKey names)
UNDO_SHORTCUT = "Undo"
REDO_SHORTCUT = "Redo"
