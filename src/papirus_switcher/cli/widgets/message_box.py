"""Bordered box for error messages."""

from __future__ import annotations

import textwrap

from papirus_switcher.cli.widgets.base import BaseWidget, Rect

MAX_BOX_WIDTH = 60


def wrap_message(message: str, max_width: int) -> list[str]:
    """Split message into lines no wider than max_width."""
    lines: list[str] = []
    for raw_line in message.splitlines() or [""]:
        raw_line = raw_line.rstrip().expandtabs(4)
        if len(raw_line) <= max_width:
            lines.append(raw_line)
        else:
            lines.extend(textwrap.wrap(raw_line, max_width, break_long_words=True) or [""])
    return lines


class MessageBoxWidget(BaseWidget):
    """
    Rounded box sized to the longest message line.
    
    The content width is capped at MAX_BOX_WIDTH (and the terminal
    width); longer lines wrap.
    """

    def __init__(self, title: str = "Error", style: str = "31") -> None:
        self.title = title
        self.style = style
        self.message = ""

    def render(self, bounds: Rect) -> list[str]:
        cap = max(8, min(MAX_BOX_WIDTH, bounds.width - 4))
        lines = wrap_message(self.message, cap)
        inner = max(len(self.title) + 2, max(len(line) for line in lines))

        s = f"\x1b[{self.style}m"
        r = "\x1b[0m"
        title = f" {self.title} "
        out = [f"{s}╭─\x1b[1m{title}{r}{s}{'─' * (inner - len(title) + 1)}╮{r}"]
        for line in lines:
            out.append(f"{s}│{r} {line:<{inner}} {s}│{r}")
        out.append(f"{s}╰{'─' * (inner + 2)}╯{r}")
        return out
