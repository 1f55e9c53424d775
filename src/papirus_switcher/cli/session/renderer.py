"""Compose the picker screen from selection state."""

from __future__ import annotations

from typing import Optional

from papirus_switcher.cli.core.ansi_text import truncate
from papirus_switcher.cli.core.shortcuts import (
    ShortcutContext,
    ShortcutRegistry,
    get_shortcut_registry,
)
from papirus_switcher.cli.core.terminal import TerminalSize
from papirus_switcher.cli.widgets.base import Rect
from papirus_switcher.cli.widgets.color_list import ColorListWidget
from papirus_switcher.cli.widgets.header import HeaderWidget
from papirus_switcher.cli.widgets.message_box import MessageBoxWidget
from papirus_switcher.cli.widgets.search_bar import SearchBarWidget
from papirus_switcher.cli.widgets.status_bar import Shortcut, StatusBarWidget
from papirus_switcher.config import Settings
from papirus_switcher.core.catalog import Catalog
from papirus_switcher.core.filter_view import FilterView
from papirus_switcher.core.state import SelectionState


class Renderer:
    """
    Builds one full frame per call.
    
    Reads the selection state and never changes it. The only state
    kept between frames is the list's scroll offset.
    """

    def __init__(
        self,
        catalog: Catalog,
        settings: Optional[Settings] = None,
        registry: Optional[ShortcutRegistry] = None,
    ) -> None:
        self.catalog = catalog
        self.settings = settings or Settings()
        self.registry = registry or get_shortcut_registry()

        self.header = HeaderWidget()
        self.color_list = ColorListWidget(truecolor=self.settings.truecolor)
        self.search_bar = SearchBarWidget()
        self.error_box = MessageBoxWidget(title="Could not apply")
        self.status_bar = StatusBarWidget()

    def frame(self, state: SelectionState, view: FilterView, size: TerminalSize) -> list[str]:
        """Render every line of the screen for the given state."""
        width = size.cols

        self.header.hint = self._hint(state, view)
        top = self.header.render(Rect(width, 4))
        top.append("")

        bottom: list[str] = []
        if state.search_mode:
            self.search_bar.text = state.filter_text
            bottom.append("")
            bottom.extend(self.search_bar.render(Rect(width, 1)))
        if state.error_message:
            self.error_box.message = state.error_message
            bottom.append("")
            bottom.extend(f" {line}" for line in self.error_box.render(Rect(width, 0)))

        footer = self._footer(state, width)

        list_height = max(1, size.rows - len(top) - len(bottom) - len(footer) - 1)
        self.color_list.update(view, state.highlighted_index, state.active_index)
        rows = self.color_list.render(Rect(width, list_height))

        lines = top + rows + bottom
        # Footer stays on the last row
        lines = lines[:max(0, size.rows - len(footer))]
        while len(lines) < size.rows - len(footer):
            lines.append("")
        lines.extend(footer)

        return [truncate(line, width) for line in lines]

    def _hint(self, state: SelectionState, view: FilterView) -> str:
        total = self.catalog.size()
        if state.search_mode:
            return f"Type to filter by name · {len(view)}/{total} match"
        hint = f"Choose the folder color for {self.settings.theme}"
        if state.filter_text:
            hint += f" · filter '{state.filter_text}' ({len(view)}/{total})"
        return hint

    def _footer(self, state: SelectionState, width: int) -> list[str]:
        context = ShortcutContext.SEARCH if state.search_mode else ShortcutContext.BROWSE
        self.status_bar.set_shortcuts([
            Shortcut(key, label) for key, label in self.registry.get_status_bar_hints(context)
        ])
        self.status_bar.set_left(f"↑↓ move   active: {state.active_entry(self.catalog).name}")
        return self.status_bar.render(Rect(width, 1))
