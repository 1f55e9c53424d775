"""Mutable per-session selection state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from papirus_switcher.core.catalog import Catalog, Entry
from papirus_switcher.core.filter_view import FilterView


@dataclass
class SelectionState:
    """
    Cursor, filter and error state for one picker session.
    
    Attributes:
        active_index: Catalog index the system reports as in effect.
            Fixed for the whole session.
        highlighted_index: Catalog index under the cursor. Always a valid
            index into the full catalog, even while a filter is applied.
        filter_text: Current filter; only edited in search mode.
        search_mode: Whether keystrokes edit the filter.
        error_message: Failure text from the last apply attempt.
    """
    active_index: int
    highlighted_index: int
    filter_text: str = ""
    search_mode: bool = False
    error_message: Optional[str] = None

    @classmethod
    def start(cls, catalog: Catalog, active_name: Optional[str]) -> SelectionState:
        """Initial state: cursor on the active entry, or index 0 if unknown."""
        index = catalog.index_of(active_name) if active_name else None
        if index is None:
            index = 0
        return cls(active_index=index, highlighted_index=index)

    def highlighted_entry(self, catalog: Catalog) -> Entry:
        return catalog.entry_at(self.highlighted_index)

    def active_entry(self, catalog: Catalog) -> Entry:
        return catalog.entry_at(self.active_index)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def reanchor(self, view: FilterView) -> None:
        """Snap the cursor to the first visible entry if it is filtered out."""
        first = view.first()
        if first is not None and not view.contains(self.highlighted_index):
            self.highlighted_index = first.index

    def move(self, view: FilterView, delta: int) -> None:
        """Move by delta rows within the view, clamping at both ends."""
        if not view:
            return
        self.reanchor(view)
        pos = view.position_of(self.highlighted_index)
        if pos is None:
            pos = 0
        pos = max(0, min(len(view) - 1, pos + delta))
        self.highlighted_index = view[pos].index

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def enter_search(self) -> None:
        self.search_mode = True

    def type_char(self, ch: str) -> None:
        if self.search_mode:
            self.filter_text += ch

    def backspace(self) -> None:
        if self.search_mode:
            self.filter_text = self.filter_text[:-1]

    def follow_filter(self, view: FilterView) -> None:
        """Put the cursor on the first match of a just-edited filter."""
        first = view.first()
        if first is not None:
            self.highlighted_index = first.index

    def cancel_search(self) -> None:
        """Leave search mode and drop the filter."""
        self.search_mode = False
        self.filter_text = ""

    def confirm_search(self, view: FilterView) -> None:
        """Leave search mode keeping the filter and a visible cursor."""
        self.reanchor(view)
        self.search_mode = False

    # -------------------------------------------------------------------------
    # Errors
    # -------------------------------------------------------------------------

    def set_error(self, message: str) -> None:
        self.error_message = message

    def clear_error(self) -> None:
        self.error_message = None
