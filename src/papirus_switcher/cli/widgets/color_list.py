"""Scrollable list of folder colors with swatches."""

from __future__ import annotations

from papirus_switcher.cli.widgets.base import SWATCH, BaseWidget, Rect, render_swatch
from papirus_switcher.core.filter_view import FilterView, VisibleEntry

HIGHLIGHT_MARKER = "▶"
ACTIVE_MARKER = "● active"


class ColorListWidget(BaseWidget):
    """
    The visible folder colors, one per row.
    
    Each row reads: highlight marker, swatch in the folder's color,
    name, active marker. Rows are keyed by catalog index, so the
    markers follow the entries through any filter.
    """

    def __init__(self, truecolor: bool = True) -> None:
        self.truecolor = truecolor
        self._view = FilterView(())
        self._highlighted: int = 0
        self._active: int = 0
        self._scroll_offset: int = 0

    def update(self, view: FilterView, highlighted: int, active: int) -> None:
        """Set what the next render shows."""
        self._view = view
        self._highlighted = highlighted
        self._active = active

    def _adjust_scroll_for_height(self, visible_height: int) -> None:
        """Ensure the highlighted row is inside the viewport."""
        if visible_height <= 0:
            return
        pos = self._view.position_of(self._highlighted) or 0
        if pos < self._scroll_offset:
            self._scroll_offset = pos
        elif pos >= self._scroll_offset + visible_height:
            self._scroll_offset = pos - visible_height + 1
        # Don't leave blank rows at the bottom after the view shrank
        max_offset = max(0, len(self._view) - visible_height)
        self._scroll_offset = min(self._scroll_offset, max_offset)

    def render(self, bounds: Rect) -> list[str]:
        if not self._view:
            return ["\x1b[90m   No colors match\x1b[0m"]

        self._adjust_scroll_for_height(bounds.height)
        visible_end = min(self._scroll_offset + bounds.height, len(self._view))
        name_width = max(len(row.entry.name) for row in self._view)

        return [
            self._render_row(self._view[i], name_width)
            for i in range(self._scroll_offset, visible_end)
        ]

    def _render_row(self, row: VisibleEntry, name_width: int) -> str:
        is_highlighted = row.index == self._highlighted
        is_active = row.index == self._active

        swatch = render_swatch(row.entry.color, self.truecolor)
        marker = f"\x1b[1;36m{HIGHLIGHT_MARKER}\x1b[0m" if is_highlighted else " "
        name = f"{row.entry.name:<{name_width}}"
        if is_highlighted:
            name = f"\x1b[1;7m {name} \x1b[0m"
        else:
            name = f" {name} "
        active = f" \x1b[32m{ACTIVE_MARKER}\x1b[0m" if is_active else ""

        return f" {marker} {swatch}{name}{active}"

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset
