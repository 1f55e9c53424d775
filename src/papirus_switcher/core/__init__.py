"""Core data structures: catalog, filter view, selection state."""

from papirus_switcher.core.color import Color, ColorMode
from papirus_switcher.core.catalog import Catalog, Entry, DEFAULT_CATALOG
from papirus_switcher.core.filter_view import FilterView, VisibleEntry, compute_filter_view
from papirus_switcher.core.state import SelectionState

__all__ = [
    "Color",
    "ColorMode",
    "Catalog",
    "Entry",
    "DEFAULT_CATALOG",
    "FilterView",
    "VisibleEntry",
    "compute_filter_view",
    "SelectionState",
]
