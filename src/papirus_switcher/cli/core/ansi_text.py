"""Measure, cut and layer strings that contain SGR escape codes."""

from __future__ import annotations

import re

RESET = "\x1b[0m"

# CSI sequences, including private-mode (?) and ~-terminated forms
_CSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z~]")


def strip_ansi(s: str) -> str:
    return _CSI.sub("", s)


def visible_len(s: str) -> int:
    """Columns s takes on screen (one per non-escape character)."""
    return len(strip_ansi(s))


def truncate(s: str, max_width: int) -> str:
    """
    Cut s to at most max_width visible columns.

    Escape codes before the cut are kept. A reset is appended when
    anything was cut so a style can't run into the next line.
    """
    if max_width <= 0:
        return ""

    out: list[str] = []
    shown = 0
    pos = 0
    while pos < len(s) and shown < max_width:
        code = _CSI.match(s, pos)
        if code:
            out.append(code.group())
            pos = code.end()
            continue
        out.append(s[pos])
        shown += 1
        pos += 1

    if pos < len(s):
        out.append(RESET)
    return "".join(out)


def pad_to_width(s: str, width: int) -> str:
    return s + " " * max(0, width - visible_len(s))


def overlay_centered(lines: list[str], box: list[str], width: int, height: int) -> list[str]:
    """
    Lay box over the middle of a width x height screen of lines.

    On the rows the box covers, whatever sits left of the box stays and
    everything right of its left edge is replaced by the box line.
    """
    box_width = max((visible_len(line) for line in box), default=0)
    left = max(0, (width - box_width) // 2)
    top = max(0, (height - len(box)) // 2)

    screen = list(lines)
    screen.extend([""] * max(0, top + len(box) - len(screen)))

    for offset, box_line in enumerate(box):
        row = top + offset
        kept = pad_to_width(truncate(screen[row], left), left)
        screen[row] = f"{kept}{RESET}{box_line}{RESET}"
    return screen
