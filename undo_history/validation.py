"""Argument guards for history operations."""
from __future__ import annotations

from typing import Any


class InvalidActionError(ValueError):
    """Raised when something that is not a reversible action is registered."""


def _is_callable_attr(obj: Any, name: str) -> bool:
    return callable(getattr(obj, name, None))


def require_action(action: Any, name: str = "action") -> Any:
    """Validate a reversible *action* argument.

    The action must not be ``None`` and must expose callable ``undo`` and
    ``redo`` attributes. Returns the action unchanged.
    """
    if action is None:
        raise InvalidActionError(f"{name} must not be None")

    missing = [attr for attr in ("undo", "redo") if not _is_callable_attr(action, attr)]
    if missing:
        raise InvalidActionError(
            f"{name} must provide callable {' and '.join(missing)}: {action!r}"
        )

    return action
