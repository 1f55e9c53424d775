"""Tests for key decoding and interpretation."""

import os

import pytest

from papirus_switcher.cli.core.actions import NO_ACTION, Action, ActionKind
from papirus_switcher.cli.core.input import InputReader, Key, KeyEvent, decode_key
from papirus_switcher.cli.core.interpreter import interpret
from papirus_switcher.cli.core.shortcuts import ShortcutContext, create_default_shortcuts

from conftest import BACKSPACE, DOWN, ENTER, ESCAPE, TAB, UNKNOWN, UP, char


def decode(text: str) -> list:
    """Decode already-buffered input into events."""
    reader = InputReader(fd=-1)
    reader.feed(text)
    events = []
    while reader.pending:
        events.append(reader.read())
    return events


class TestInputReader:
    """Tests for InputReader decoding."""

    def test_simple_keys(self) -> None:
        events = decode("\r\x7f\t")
        assert [e.key for e in events] == [Key.ENTER, Key.BACKSPACE, Key.TAB]

    def test_printable(self) -> None:
        events = decode("q/é")
        assert [e.char for e in events] == ["q", "/", "é"]
        assert all(e.is_char for e in events)

    @pytest.mark.parametrize("seq,key", [
        ("\x1b[A", Key.UP),
        ("\x1b[B", Key.DOWN),
        ("\x1bOA", Key.UP),
        ("\x1bOB", Key.DOWN),
        ("\x1b[5~", Key.PAGE_UP),
        ("\x1b[3~", Key.DELETE),
    ])
    def test_escape_sequences(self, seq: str, key: Key) -> None:
        assert decode(seq) == [KeyEvent(key=key, raw=seq)]

    def test_lone_escape(self) -> None:
        assert decode("\x1b") == [KeyEvent(key=Key.ESCAPE, raw="\x1b")]

    def test_sequences_back_to_back(self) -> None:
        events = decode("\x1b[B\x1b[Bx")
        assert [e.key for e in events[:2]] == [Key.DOWN, Key.DOWN]
        assert events[2].char == "x"

    def test_unknown_sequence_is_neither_key_nor_char(self) -> None:
        (event,) = decode("\x1b[99~")
        assert event.key is None and event.char is None

    def test_control_characters_are_dropped(self) -> None:
        assert decode("\x03") == [None]

    def test_alt_key_is_unknown(self) -> None:
        assert decode_key("\x1bx") == (KeyEvent(raw="\x1bx"), 2)

    def test_escape_then_escape(self) -> None:
        assert decode("\x1b\x1b") == [KeyEvent(key=Key.ESCAPE, raw="\x1b")] * 2

    def test_truncated_sequence_consumed_whole(self) -> None:
        assert decode_key("\x1b[1") == (KeyEvent(raw="\x1b[1"), 3)

    def test_empty_buffer(self) -> None:
        assert decode_key("") == (None, 0)

    def test_reads_from_fd(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, "\x1b[Aa".encode())
            reader = InputReader(fd=read_fd)
            assert reader.read(timeout=0.5).key == Key.UP
            assert reader.read(timeout=0.5).char == "a"
            assert reader.read(timeout=0.01) is None
        finally:
            os.close(read_fd)
            os.close(write_fd)


class TestInterpretBrowse:
    """Tests for normal-mode interpretation."""

    @pytest.mark.parametrize("event,kind", [
        (UP, ActionKind.MOVE_UP),
        (DOWN, ActionKind.MOVE_DOWN),
        (ENTER, ActionKind.APPLY),
        (ESCAPE, ActionKind.EXIT),
        (char("q"), ActionKind.EXIT),
        (char("/"), ActionKind.TOGGLE_SEARCH),
    ])
    def test_bindings(self, event: KeyEvent, kind: ActionKind) -> None:
        assert interpret(event, search_mode=False) == Action(kind)

    @pytest.mark.parametrize("event", [char("x"), char("Q"), BACKSPACE, TAB, UNKNOWN, None])
    def test_everything_else_is_none(self, event) -> None:
        assert interpret(event, search_mode=False) is NO_ACTION


class TestInterpretSearch:
    """Tests for search-mode interpretation."""

    @pytest.mark.parametrize("ch", ["b", "q", "/", " ", "Z"])
    def test_printable_types(self, ch: str) -> None:
        assert interpret(char(ch), search_mode=True) == Action(ActionKind.TYPE_CHAR, ch)

    def test_editing_keys(self) -> None:
        assert interpret(BACKSPACE, True).kind == ActionKind.BACKSPACE
        assert interpret(ESCAPE, True).kind == ActionKind.CANCEL_SEARCH
        assert interpret(UP, True).kind == ActionKind.MOVE_UP
        assert interpret(DOWN, True).kind == ActionKind.MOVE_DOWN

    def test_enter_needs_matches(self) -> None:
        assert interpret(ENTER, True, has_matches=True).kind == ActionKind.CONFIRM_SEARCH_SELECTION
        assert interpret(ENTER, True, has_matches=False) is NO_ACTION

    @pytest.mark.parametrize("event", [TAB, UNKNOWN, None])
    def test_everything_else_is_none(self, event) -> None:
        assert interpret(event, search_mode=True) is NO_ACTION


class TestShortcutRegistry:
    """Tests for the binding registry."""

    def test_hints_follow_context(self) -> None:
        registry = create_default_shortcuts()
        browse = dict(registry.get_status_bar_hints(ShortcutContext.BROWSE))
        assert browse == {"Enter": "Apply", "/": "Search", "q/Esc": "Quit"}
        search = dict(registry.get_status_bar_hints(ShortcutContext.SEARCH))
        assert search == {"Enter": "Select", "Bksp": "Delete", "Esc": "Clear"}

    def test_get(self) -> None:
        registry = create_default_shortcuts()
        shortcut = registry.get("search")
        assert shortcut is not None
        assert shortcut.action == ActionKind.TOGGLE_SEARCH
        assert registry.get("missing") is None
