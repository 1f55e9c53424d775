"""Modal confirmation before applying a folder color."""

from __future__ import annotations

from typing import Callable, Optional

from papirus_switcher.cli.core.input import KeyEvent
from papirus_switcher.cli.core.shortcuts import (
    ShortcutContext,
    ShortcutRegistry,
    get_shortcut_registry,
)
from papirus_switcher.cli.widgets.base import BaseWidget, Rect, render_swatch
from papirus_switcher.core.catalog import Entry


class ConfirmDialogWidget(BaseWidget):
    """
    Asks whether to apply one entry.
    
    Only the CONFIRM shortcuts end the dialog; every other key is
    ignored and the dialog keeps waiting.
    """

    def __init__(
        self,
        entry: Entry,
        truecolor: bool = True,
        registry: Optional[ShortcutRegistry] = None,
    ) -> None:
        self.entry = entry
        self.truecolor = truecolor
        self.registry = registry or get_shortcut_registry()

    def decide(self, event: KeyEvent) -> Optional[bool]:
        """True to apply, False to cancel, None to keep waiting."""
        shortcut = self.registry.match(event, ShortcutContext.CONFIRM)
        if shortcut is None:
            return None
        return shortcut.id == "confirm_yes"

    def run(
        self,
        read_key: Callable[[], KeyEvent],
        paint: Callable[[list[str]], None],
    ) -> bool:
        """Show the dialog until the user confirms or cancels."""
        while True:
            paint(self.render(Rect(0, 0)))
            decision = self.decide(read_key())
            if decision is not None:
                return decision

    def render(self, bounds: Rect) -> list[str]:
        swatch = render_swatch(self.entry.color, self.truecolor)
        hints = " · ".join(
            f"{key} {label.lower()}"
            for key, label in self.registry.get_status_bar_hints(ShortcutContext.CONFIRM)
        )

        question = "Apply folder color"
        inner = max(len(question), len(self.entry.name) + 4, len(hints)) + 2

        frame = "\x1b[1;97;48;5;236m"
        body = "\x1b[97;48;5;236m"
        r = "\x1b[0m"

        def row(text: str, width: int) -> str:
            return f"{body}│ {text}{body}{' ' * (inner - width)} │{r}"

        return [
            f"{frame}╭{'─' * (inner + 2)}╮{r}",
            row(f"\x1b[1m{question}", len(question)),
            row("", 0),
            row(f"{swatch}{body}  \x1b[1m{self.entry.name}", len(self.entry.name) + 4),
            row("", 0),
            row(f"\x1b[90m{hints}", len(hints)),
            f"{frame}╰{'─' * (inner + 2)}╯{r}",
        ]
