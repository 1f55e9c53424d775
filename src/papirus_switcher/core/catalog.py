"""The fixed, ordered catalog of folder colors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional

from papirus_switcher.core.color import Color
from papirus_switcher.core.constants import FOLDER_COLORS, FOLDER_PALETTE
from papirus_switcher.errors import CatalogError, OutOfRangeError


@dataclass(frozen=True)
class Entry:
    """One selectable folder color."""
    name: str
    color: Color


class Catalog:
    """Immutable ordered sequence of entries with unique names."""

    def __init__(self, entries: Iterable[Entry]) -> None:
        self._entries: tuple[Entry, ...] = tuple(entries)
        self._by_name: dict[str, int] = {}
        for i, entry in enumerate(self._entries):
            if entry.name in self._by_name:
                raise CatalogError(f"Duplicate catalog entry: {entry.name!r}")
            self._by_name[entry.name] = i

    @classmethod
    def from_names(
        cls,
        names: Iterable[str],
        palette: Mapping[str, tuple[int, int, int]],
    ) -> Catalog:
        """
        Build a catalog from color names and a name -> RGB table.
        
        Every name must have a palette entry; a gap is a definition
        error, not something to paper over at render time.
        """
        entries: list[Entry] = []
        for name in names:
            if name not in palette:
                raise CatalogError(f"No display color defined for {name!r}")
            entries.append(Entry(name, Color.from_rgb(*palette[name])))
        return cls(entries)

    def size(self) -> int:
        return len(self._entries)

    def entry_at(self, index: int) -> Entry:
        """Entry at a catalog index. Raises OutOfRangeError."""
        if not 0 <= index < len(self._entries):
            raise OutOfRangeError(index, len(self._entries))
        return self._entries[index]

    def index_of(self, name: str) -> Optional[int]:
        """Catalog index of the entry called name, if any."""
        return self._by_name.get(name)

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)


# Built at import time so an incomplete palette fails immediately
DEFAULT_CATALOG = Catalog.from_names(FOLDER_COLORS, FOLDER_PALETTE)
