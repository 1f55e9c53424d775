"""Shared fixtures: small catalogs, scripted keys, fake terminal and backend."""

from __future__ import annotations

import shutil
from contextlib import contextmanager
from typing import Iterator, Optional

import pytest

from papirus_switcher.cli.core.input import Key, KeyEvent
from papirus_switcher.cli.core.terminal import TerminalSize
from papirus_switcher.core.catalog import Catalog
from papirus_switcher.core.constants import FOLDER_PALETTE
from papirus_switcher.errors import ApplyError


# -----------------------------------------------------------------------------
# Key helpers
# -----------------------------------------------------------------------------

UP = KeyEvent(key=Key.UP, raw="\x1b[A")
DOWN = KeyEvent(key=Key.DOWN, raw="\x1b[B")
ENTER = KeyEvent(key=Key.ENTER, raw="\r")
ESCAPE = KeyEvent(key=Key.ESCAPE, raw="\x1b")
BACKSPACE = KeyEvent(key=Key.BACKSPACE, raw="\x7f")
TAB = KeyEvent(key=Key.TAB, raw="\t")
UNKNOWN = KeyEvent(raw="\x1b[99~")


def char(ch: str) -> KeyEvent:
    return KeyEvent(char=ch, raw=ch)


def chars(text: str) -> list[KeyEvent]:
    return [char(ch) for ch in text]


class ScriptExhausted(Exception):
    """The test ran out of scripted key presses."""


class ScriptedInput:
    """Input reader that replays a fixed list of key events."""

    def __init__(self, events: list[KeyEvent]) -> None:
        self.events = list(events)

    def read_blocking(self) -> KeyEvent:
        if not self.events:
            raise ScriptExhausted("no more key events")
        return self.events.pop(0)


class FakeTerminal:
    """Records frames and mode changes instead of touching a tty."""

    def __init__(self, rows: int = 40, cols: int = 80) -> None:
        self._size = TerminalSize(rows, cols)
        self.frames: list[list[str]] = []
        self.written: list[str] = []
        self.log: list[str] = []
        self.raw = False

    def size(self) -> TerminalSize:
        return self._size

    def draw(self, lines: list[str]) -> None:
        self.frames.append(list(lines))

    def write(self, text: str) -> None:
        self.written.append(text)

    @contextmanager
    def managed_mode(self) -> Iterator[None]:
        self.log.append("enter")
        self.raw = True
        try:
            yield
        finally:
            self.raw = False
            self.log.append("exit")

    @contextmanager
    def suspended(self) -> Iterator[None]:
        self.log.append("suspend")
        self.raw = False
        try:
            yield
        finally:
            self.raw = True
            self.log.append("resume")

    @property
    def last_frame(self) -> list[str]:
        return self.frames[-1]


class FakeBackend:
    """In-memory papirus-folders stand-in."""

    def __init__(self, active: Optional[str] = None, failures: Optional[list[str]] = None) -> None:
        self.active = active
        self.failures = list(failures or [])
        self.applied: list[str] = []
        self.raw_during_apply: list[bool] = []
        self.terminal: Optional[FakeTerminal] = None

    def query_active(self) -> Optional[str]:
        return self.active

    def apply(self, name: str) -> None:
        self.applied.append(name)
        if self.terminal is not None:
            self.raw_during_apply.append(self.terminal.raw)
        if self.failures:
            raise ApplyError(self.failures.pop(0))


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def rgb_catalog() -> Catalog:
    """red, green, blue."""
    return Catalog.from_names(["red", "green", "blue"], FOLDER_PALETTE)


@pytest.fixture
def blues_catalog() -> Catalog:
    """A catalog where "bl" matches exactly blue and bluegrey."""
    return Catalog.from_names(
        ["red", "green", "blue", "bluegrey", "yellow"], FOLDER_PALETTE
    )


@pytest.fixture
def terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def papirus_folders() -> str:
    """Path of a real papirus-folders, skips if unavailable."""
    path = shutil.which("papirus-folders")
    if path is None:
        pytest.skip("papirus-folders not installed")
    return path


@pytest.fixture
def make_command(tmp_path):
    """Factory writing a shell script that stands in for papirus-folders."""
    if shutil.which("sh") is None:
        pytest.skip("no POSIX shell")

    def make(body: str) -> str:
        path = tmp_path / "papirus-folders"
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return str(path)

    return make
