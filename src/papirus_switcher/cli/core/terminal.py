"""Screen and tty mode control for the full-screen picker (Unix)."""

from __future__ import annotations

import os
import sys
import termios
import tty
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

ENTER_ALT_SCREEN = "\x1b[?1049h"
LEAVE_ALT_SCREEN = "\x1b[?1049l"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
HOME_AND_CLEAR = "\x1b[2J\x1b[H"
RESET_ATTRS = "\x1b[0m"

FALLBACK_SIZE = (24, 80)


@dataclass(frozen=True)
class TerminalSize:
    rows: int
    cols: int


def _emit(*codes: str) -> None:
    sys.stdout.write("".join(codes))
    sys.stdout.flush()


class Terminal:
    """
    The controlling terminal.

    All methods are static; the picker passes the class itself around
    so tests can substitute an object with the same methods.
    """

    # Cooked settings saved by raw_mode(), restored by suspended()
    _cooked: Optional[list] = None

    @staticmethod
    def size() -> TerminalSize:
        try:
            size = os.get_terminal_size()
        except OSError:
            return TerminalSize(*FALLBACK_SIZE)
        return TerminalSize(size.lines, size.columns)

    @staticmethod
    def write(text: str) -> None:
        _emit(text)

    @staticmethod
    def draw(lines: list[str]) -> None:
        """Replace the whole screen with lines."""
        # No output post-processing in raw mode, so rows end in \r\n
        _emit(HOME_AND_CLEAR, "\r\n".join(lines))

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        fd = sys.stdin.fileno()
        cooked = termios.tcgetattr(fd)
        Terminal._cooked = cooked
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, cooked)
            Terminal._cooked = None

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """
        Alternate screen, hidden cursor and raw input for the duration.

        Everything is put back on exit, including when the body raises.
        """
        _emit(ENTER_ALT_SCREEN, HIDE_CURSOR)
        try:
            with Terminal.raw_mode():
                yield
        finally:
            _emit(RESET_ATTRS, SHOW_CURSOR, LEAVE_ALT_SCREEN)

    @staticmethod
    @contextmanager
    def suspended() -> Iterator[None]:
        """
        Hand the terminal back in cooked mode for a child process.

        Needed for sudo's password prompt. Full-screen raw mode comes
        back on the way out whether or not the child succeeded.
        """
        fd = sys.stdin.fileno()
        cooked = Terminal._cooked
        _emit(RESET_ATTRS, SHOW_CURSOR, LEAVE_ALT_SCREEN)
        if cooked is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, cooked)
        try:
            yield
        finally:
            if cooked is not None:
                tty.setraw(fd)
            _emit(ENTER_ALT_SCREEN, HIDE_CURSOR)
