"""Map key events to picker actions."""

from __future__ import annotations

from typing import Optional

from papirus_switcher.cli.core.actions import NO_ACTION, Action, ActionKind
from papirus_switcher.cli.core.input import KeyEvent
from papirus_switcher.cli.core.shortcuts import (
    ShortcutContext,
    ShortcutRegistry,
    get_shortcut_registry,
)


def interpret(
    event: Optional[KeyEvent],
    search_mode: bool,
    has_matches: bool = True,
    registry: Optional[ShortcutRegistry] = None,
) -> Action:
    """
    Turn one key event into an Action.
    
    In search mode printable characters become TYPE_CHAR (even ones
    bound in browse mode, like ``q`` and ``/``), and Enter only
    confirms the selection while something matches. Events that could
    not be decoded, and unbound keys, give NO_ACTION.
    """
    if event is None:
        return NO_ACTION
    registry = registry or get_shortcut_registry()

    if search_mode:
        shortcut = registry.match(event, ShortcutContext.SEARCH)
        if shortcut is not None:
            if shortcut.action == ActionKind.CONFIRM_SEARCH_SELECTION and not has_matches:
                return NO_ACTION
            return Action(shortcut.action)
        if event.is_char and event.char:
            return Action.type_char(event.char)
        return NO_ACTION

    shortcut = registry.match(event, ShortcutContext.BROWSE)
    if shortcut is not None:
        return Action(shortcut.action)
    return NO_ACTION
