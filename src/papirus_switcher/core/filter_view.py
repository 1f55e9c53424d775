"""Filtered, order-preserving view over the catalog."""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

from papirus_switcher.core.catalog import Catalog, Entry


class VisibleEntry(NamedTuple):
    """An entry together with its index in the full catalog."""
    index: int
    entry: Entry


class FilterView:
    """
    The entries whose name contains the filter text, case-insensitively.
    
    Order follows the catalog. An empty filter shows everything with
    the identity index mapping. Views are cheap and recomputed every
    frame; nothing keeps one around between input events.
    """

    def __init__(self, rows: tuple[VisibleEntry, ...]) -> None:
        self._rows = rows

    @classmethod
    def compute(cls, catalog: Catalog, filter_text: str) -> FilterView:
        needle = filter_text.lower()
        return cls(tuple(
            VisibleEntry(i, entry)
            for i, entry in enumerate(catalog)
            if needle in entry.name.lower()
        ))

    @property
    def rows(self) -> tuple[VisibleEntry, ...]:
        return self._rows

    @property
    def indices(self) -> list[int]:
        return [row.index for row in self._rows]

    def first(self) -> Optional[VisibleEntry]:
        return self._rows[0] if self._rows else None

    def position_of(self, index: int) -> Optional[int]:
        """Position within the view of a catalog index, or None if hidden."""
        for pos, row in enumerate(self._rows):
            if row.index == index:
                return pos
        return None

    def contains(self, index: int) -> bool:
        return self.position_of(index) is not None

    def __getitem__(self, pos: int) -> VisibleEntry:
        return self._rows[pos]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[VisibleEntry]:
        return iter(self._rows)

    def __bool__(self) -> bool:
        return bool(self._rows)


def compute_filter_view(catalog: Catalog, filter_text: str) -> FilterView:
    """Module-level shorthand for FilterView.compute."""
    return FilterView.compute(catalog, filter_text)
