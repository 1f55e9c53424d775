"""Centralized keyboard shortcut registry.

This module is the single source of truth for the picker's key
bindings. The interpreter resolves key events through it, and the
footer legend and dialog hints are generated from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from papirus_switcher.cli.core.actions import ActionKind
from papirus_switcher.cli.core.input import Key, KeyEvent


class ShortcutContext(Enum):
    """Context in which a shortcut is active."""
    BROWSE = auto()          # Navigating the list
    SEARCH = auto()          # Editing the filter
    CONFIRM = auto()         # In the apply confirmation dialog


@dataclass
class ShortcutDef:
    """Definition of a keyboard shortcut.
    
    Attributes:
        id: Unique identifier for the shortcut
        keys: List of keys/chars that trigger this shortcut
        label: Short label for the footer (e.g., "Apply")
        context: Context(s) where this shortcut is active
        action: Action emitted in BROWSE/SEARCH contexts
        show_hint: Whether the footer lists this shortcut
    """
    id: str
    keys: list[str | Key]
    label: str
    context: list[ShortcutContext] = field(default_factory=lambda: [ShortcutContext.BROWSE])
    action: ActionKind = ActionKind.NONE
    show_hint: bool = True

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Get display string for the keys."""
        return "/".join(
            _key_to_display(key) if isinstance(key, Key) else key
            for key in self.keys
        )


def _key_to_display(key: Key) -> str:
    """Convert a Key enum to display string."""
    display_map = {
        Key.UP: "↑",
        Key.DOWN: "↓",
        Key.ENTER: "Enter",
        Key.ESCAPE: "Esc",
        Key.BACKSPACE: "Bksp",
    }
    return display_map.get(key, key.name)


class ShortcutRegistry:
    """Registry of shortcuts, indexed by context.
    
    Example:
        registry = create_default_shortcuts()
        shortcut = registry.match(event, ShortcutContext.BROWSE)
        if shortcut:
            kind = shortcut.action
    """

    def __init__(self) -> None:
        self._shortcuts: dict[str, ShortcutDef] = {}
        self._by_context: dict[ShortcutContext, list[ShortcutDef]] = {
            ctx: [] for ctx in ShortcutContext
        }

    def register(self, shortcut: ShortcutDef) -> None:
        """Register a shortcut definition."""
        self._shortcuts[shortcut.id] = shortcut
        for ctx in shortcut.context:
            self._by_context[ctx].append(shortcut)

    def register_many(self, shortcuts: list[ShortcutDef]) -> None:
        for shortcut in shortcuts:
            self.register(shortcut)

    def get(self, shortcut_id: str) -> Optional[ShortcutDef]:
        return self._shortcuts.get(shortcut_id)

    def match(self, event: KeyEvent, context: ShortcutContext) -> Optional[ShortcutDef]:
        """Find the first shortcut in context matching the event."""
        for shortcut in self._by_context[context]:
            if shortcut.matches(event):
                return shortcut
        return None

    def get_status_bar_hints(self, context: ShortcutContext) -> list[tuple[str, str]]:
        """(key_display, label) pairs for the footer."""
        return [
            (shortcut.key_display, shortcut.label)
            for shortcut in self._by_context[context]
            if shortcut.show_hint
        ]


def create_default_shortcuts() -> ShortcutRegistry:
    """Create the registry with the picker's bindings."""
    registry = ShortcutRegistry()

    # -------------------------------------------------------------------------
    # Navigation (list and filtered results)
    # -------------------------------------------------------------------------
    registry.register_many([
        ShortcutDef(
            id="move_up",
            keys=[Key.UP],
            label="Up",
            context=[ShortcutContext.BROWSE, ShortcutContext.SEARCH],
            action=ActionKind.MOVE_UP,
            show_hint=False,
        ),
        ShortcutDef(
            id="move_down",
            keys=[Key.DOWN],
            label="Down",
            context=[ShortcutContext.BROWSE, ShortcutContext.SEARCH],
            action=ActionKind.MOVE_DOWN,
            show_hint=False,
        ),
    ])

    # -------------------------------------------------------------------------
    # Browsing
    # -------------------------------------------------------------------------
    registry.register_many([
        ShortcutDef(
            id="apply",
            keys=[Key.ENTER],
            label="Apply",
            action=ActionKind.APPLY,
        ),
        ShortcutDef(
            id="search",
            keys=["/"],
            label="Search",
            action=ActionKind.TOGGLE_SEARCH,
        ),
        ShortcutDef(
            id="quit",
            keys=["q", Key.ESCAPE],
            label="Quit",
            action=ActionKind.EXIT,
        ),
    ])

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------
    registry.register_many([
        ShortcutDef(
            id="search_accept",
            keys=[Key.ENTER],
            label="Select",
            context=[ShortcutContext.SEARCH],
            action=ActionKind.CONFIRM_SEARCH_SELECTION,
        ),
        ShortcutDef(
            id="search_backspace",
            keys=[Key.BACKSPACE],
            label="Delete",
            context=[ShortcutContext.SEARCH],
            action=ActionKind.BACKSPACE,
        ),
        ShortcutDef(
            id="search_cancel",
            keys=[Key.ESCAPE],
            label="Clear",
            context=[ShortcutContext.SEARCH],
            action=ActionKind.CANCEL_SEARCH,
        ),
    ])

    # -------------------------------------------------------------------------
    # Confirmation dialog
    # -------------------------------------------------------------------------
    registry.register_many([
        ShortcutDef(
            id="confirm_yes",
            keys=[Key.ENTER],
            label="Apply",
            context=[ShortcutContext.CONFIRM],
        ),
        ShortcutDef(
            id="confirm_no",
            keys=[Key.ESCAPE, "q"],
            label="Cancel",
            context=[ShortcutContext.CONFIRM],
        ),
    ])

    return registry


# Global default registry instance
_default_registry: Optional[ShortcutRegistry] = None


def get_shortcut_registry() -> ShortcutRegistry:
    """Get the global shortcut registry instance."""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_shortcuts()
    return _default_registry
