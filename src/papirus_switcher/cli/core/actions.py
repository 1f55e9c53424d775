"""Actions produced by interpreting key events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class ActionKind(Enum):
    """What a key press asks the picker to do."""
    NONE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    APPLY = auto()
    TOGGLE_SEARCH = auto()
    TYPE_CHAR = auto()
    BACKSPACE = auto()
    CANCEL_SEARCH = auto()
    CONFIRM_SEARCH_SELECTION = auto()
    EXIT = auto()


@dataclass(frozen=True)
class Action:
    """An ActionKind plus the typed character for TYPE_CHAR."""
    kind: ActionKind
    char: Optional[str] = None

    @classmethod
    def type_char(cls, ch: str) -> Action:
        return cls(ActionKind.TYPE_CHAR, ch)


NO_ACTION = Action(ActionKind.NONE)
