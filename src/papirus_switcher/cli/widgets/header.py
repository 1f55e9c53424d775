"""Title banner and context hint."""

from __future__ import annotations

from papirus_switcher.cli.widgets.base import BaseWidget, Rect

TITLE = "Papirus Folder Color Switcher"


class HeaderWidget(BaseWidget):
    """Boxed title followed by a one-line hint."""

    def __init__(self, title: str = TITLE) -> None:
        self.title = title
        self.hint = ""

    def render(self, bounds: Rect) -> list[str]:
        inner = len(self.title) + 14
        pad_left = (inner - len(self.title)) // 2
        pad_right = inner - len(self.title) - pad_left
        return [
            f"\x1b[1;36m╔{'═' * inner}╗\x1b[0m",
            f"\x1b[1;36m║{' ' * pad_left}{self.title}{' ' * pad_right}║\x1b[0m",
            f"\x1b[1;36m╚{'═' * inner}╝\x1b[0m",
            f"\x1b[90m {self.hint}\x1b[0m",
        ]
