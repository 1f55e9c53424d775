"""Turn raw terminal input into key events."""

from __future__ import annotations

import codecs
import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named keys the decoder recognises."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """
    One decoded key press.

    Exactly one of key/char is set for keys we understand. Unrecognised
    escape sequences carry only their raw text.
    """
    key: Optional[Key] = None
    char: Optional[str] = None
    raw: str = ""

    @property
    def is_char(self) -> bool:
        return self.char is not None and self.key is None


ESC = "\x1b"

# Everything after ESC; CSI ("[") and SS3 ("O") forms
ESCAPE_SEQUENCES: dict[str, Key] = {
    "[A": Key.UP,
    "[B": Key.DOWN,
    "[C": Key.RIGHT,
    "[D": Key.LEFT,
    "OA": Key.UP,
    "OB": Key.DOWN,
    "OC": Key.RIGHT,
    "OD": Key.LEFT,
    "[H": Key.HOME,
    "[F": Key.END,
    "OH": Key.HOME,
    "OF": Key.END,
    "[1~": Key.HOME,
    "[4~": Key.END,
    "[5~": Key.PAGE_UP,
    "[6~": Key.PAGE_DOWN,
    "[3~": Key.DELETE,
}

CONTROL_KEYS: dict[str, Key] = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}


def _is_final(ch: str) -> bool:
    return ch.isalpha() or ch == "~"


def _sequence_length(buffer: str) -> Optional[int]:
    """
    Length of the escape sequence at the start of buffer.

    None means the sequence has not finished arriving yet.
    """
    if len(buffer) < 2 or buffer[1] == ESC:
        return 1
    if buffer[1] not in "[O":
        # Alt+key
        return 2
    for i in range(2, len(buffer)):
        if buffer[i] == ESC:
            return i
        if _is_final(buffer[i]):
            return i + 1
    return None


def decode_key(buffer: str) -> tuple[Optional[KeyEvent], int]:
    """
    Decode the first key press in buffer.

    Returns the event and how many characters it used. Control
    characters without a meaning here decode to None. An escape
    sequence cut short by the end of the buffer is consumed whole and
    reported as unknown.
    """
    if not buffer:
        return None, 0

    first = buffer[0]
    if first in CONTROL_KEYS:
        return KeyEvent(key=CONTROL_KEYS[first], raw=first), 1
    if first == ESC:
        length = _sequence_length(buffer) or len(buffer)
        if length == 1:
            return KeyEvent(key=Key.ESCAPE, raw=ESC), 1
        raw = buffer[:length]
        return KeyEvent(key=ESCAPE_SEQUENCES.get(raw[1:]), raw=raw), length
    if first.isprintable():
        return KeyEvent(char=first, raw=first), 1
    return None, 1


class InputReader:
    """
    Reads key presses from a terminal file descriptor.

    os.read() is used directly so nothing sits in Python's own stdin
    buffer where select() can't see it. Bytes are decoded incrementally,
    so a multi-byte character split across reads still arrives intact.
    """

    ESCAPE_TIMEOUT = 0.1

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = fd
        self._buffer = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def fd(self) -> int:
        if self._fd is None:
            self._fd = sys.stdin.fileno()
        return self._fd

    @property
    def pending(self) -> bool:
        return bool(self._buffer)

    def feed(self, text: str) -> None:
        """Queue input that was received some other way."""
        self._buffer += text

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """
        Next key event, or None.

        None is returned when nothing arrives within timeout and when
        the next input decodes to nothing.
        """
        if not self._buffer and self._ready(timeout):
            self._fill()
            if self._awaiting_sequence():
                self._wait_for_sequence()

        event, used = decode_key(self._buffer)
        self._buffer = self._buffer[used:]
        return event

    def read_blocking(self) -> KeyEvent:
        """Wait as long as it takes for a key event."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _fill(self) -> None:
        try:
            data = os.read(self.fd, 1024)
        except OSError:
            return
        self._buffer += self._decoder.decode(data)

    def _wait_for_sequence(self) -> None:
        """Give the rest of an escape sequence a moment to arrive."""
        deadline = time.monotonic() + self.ESCAPE_TIMEOUT
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return
            if self._ready(min(remaining, 0.025)):
                self._fill()
                if not self._awaiting_sequence():
                    return

    def _awaiting_sequence(self) -> bool:
        # A lone ESC may be the first byte of an arrow key
        if not self._buffer.startswith(ESC):
            return False
        return self._buffer == ESC or _sequence_length(self._buffer) is None

    def _ready(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
        except (ValueError, OSError):
            return False
        return bool(ready)
