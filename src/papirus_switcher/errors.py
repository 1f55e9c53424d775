"""Exception types raised by papirus-switcher."""

from __future__ import annotations


class SwitcherError(Exception):
    """Base class for all papirus-switcher errors."""


class CatalogError(SwitcherError, ValueError):
    """The folder color catalog definition is inconsistent."""


class OutOfRangeError(SwitcherError, IndexError):
    """A catalog index does not refer to an entry."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Catalog index {index} out of range (size={size})")
        self.index = index
        self.size = size


class ApplyError(SwitcherError):
    """The apply command ran and reported a failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CommandNotFoundError(ApplyError):
    """The apply command could not be launched at all."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: executable not found or not runnable")
        self.command = command
