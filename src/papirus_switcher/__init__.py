"""
papirus-switcher: pick the Papirus folder color from the terminal

Browse the folder colors shipped with the Papirus icon theme, filter
them by name, and apply one through ``papirus-folders``.

Quick Start:
    $ papirus-switcher

Library use:
    >>> from papirus_switcher import DEFAULT_CATALOG, FilterView
    >>> [row.entry.name for row in FilterView.compute(DEFAULT_CATALOG, "bl")]
    ['black', 'blue', 'bluegrey']
"""

__version__ = "0.1.0"

from papirus_switcher.core.catalog import Catalog, Entry, DEFAULT_CATALOG
from papirus_switcher.core.color import Color
from papirus_switcher.core.filter_view import FilterView
from papirus_switcher.core.state import SelectionState
from papirus_switcher.config import Settings
from papirus_switcher.errors import (
    SwitcherError,
    CatalogError,
    OutOfRangeError,
    ApplyError,
    CommandNotFoundError,
)

__all__ = [
    "__version__",
    "Catalog",
    "Entry",
    "DEFAULT_CATALOG",
    "Color",
    "FilterView",
    "SelectionState",
    "Settings",
    "SwitcherError",
    "CatalogError",
    "OutOfRangeError",
    "ApplyError",
    "CommandNotFoundError",
]
