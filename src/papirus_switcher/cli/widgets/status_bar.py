"""Footer line: active color on the left, key hints on the right."""

from __future__ import annotations

from typing import NamedTuple

from papirus_switcher.cli.core.ansi_text import truncate, visible_len
from papirus_switcher.cli.widgets.base import BaseWidget, Rect

BAR_STYLE = "\x1b[100;97m"
KEY_STYLE = "\x1b[7m"
LABEL_STYLE = "\x1b[0;100;36m"
MIN_LEFT = 12


class Shortcut(NamedTuple):
    key: str
    label: str


class StatusBarWidget(BaseWidget):
    """
    One inverted line across the bottom of the screen.

    Hints are dropped from the left end first when the terminal is too
    narrow, so the ones registered last (Quit, Cancel) stay visible.
    The left text is cut with an ellipsis after that.
    """

    def __init__(self) -> None:
        self._left_text = ""
        self._shortcuts: list[Shortcut] = []

    def set_left(self, text: str) -> None:
        self._left_text = text

    def set_shortcuts(self, shortcuts: list[Shortcut]) -> None:
        self._shortcuts = list(shortcuts)

    def _hint_parts(self, width: int) -> list[str]:
        parts: list[str] = []
        used = 0
        for shortcut in reversed(self._shortcuts):
            part = f"{KEY_STYLE} {shortcut.key} {LABEL_STYLE} {shortcut.label} "
            size = visible_len(part)
            if used + size + MIN_LEFT >= width:
                break
            parts.insert(0, part)
            used += size
        return parts

    def render(self, bounds: Rect) -> list[str]:
        width = bounds.width
        hints = "".join(self._hint_parts(width))
        hints_width = visible_len(hints)

        room = max(0, width - hints_width - 2)
        left = f" {self._left_text}"
        if len(left) > room:
            left = left[:max(0, room - 1)] + "…"

        gap = " " * max(0, width - len(left) - hints_width)
        return [truncate(f"{BAR_STYLE}{left}{gap}{hints}\x1b[0m", width)]
