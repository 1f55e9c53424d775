"""Single-line filter input."""

from __future__ import annotations

from papirus_switcher.cli.core.ansi_text import truncate
from papirus_switcher.cli.widgets.base import BaseWidget, Rect

CURSOR_GLYPH = "▌"


class SearchBarWidget(BaseWidget):
    """Shows the filter being typed, followed by a cursor glyph."""

    def __init__(self) -> None:
        self.text = ""

    def render(self, bounds: Rect) -> list[str]:
        prefix = "\x1b[1;33m / \x1b[0m"
        # Keep the tail of a long filter in view
        room = max(1, bounds.width - 4)
        text = self.text[-room:]
        return [truncate(f"{prefix}{text}\x1b[5m{CURSOR_GLYPH}\x1b[0m", bounds.width)]
