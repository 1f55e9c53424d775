"""Core TUI infrastructure - terminal I/O, input handling, key bindings."""

from papirus_switcher.cli.core.terminal import Terminal, TerminalSize
from papirus_switcher.cli.core.input import InputReader, KeyEvent, Key
from papirus_switcher.cli.core.actions import Action, ActionKind, NO_ACTION
from papirus_switcher.cli.core.shortcuts import (
    ShortcutContext,
    ShortcutDef,
    ShortcutRegistry,
    get_shortcut_registry,
)
from papirus_switcher.cli.core.interpreter import interpret

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "Action",
    "ActionKind",
    "NO_ACTION",
    "ShortcutContext",
    "ShortcutDef",
    "ShortcutRegistry",
    "get_shortcut_registry",
    "interpret",
]
