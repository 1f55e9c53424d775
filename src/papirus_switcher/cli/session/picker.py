"""Interactive folder color picker."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from papirus_switcher.backend.papirus import FolderColorBackend
from papirus_switcher.cli.core.actions import Action, ActionKind
from papirus_switcher.cli.core.ansi_text import overlay_centered
from papirus_switcher.cli.core.input import InputReader
from papirus_switcher.cli.core.interpreter import interpret
from papirus_switcher.cli.core.shortcuts import ShortcutRegistry, get_shortcut_registry
from papirus_switcher.cli.core.terminal import Terminal
from papirus_switcher.cli.session.renderer import Renderer
from papirus_switcher.cli.widgets.confirm_dialog import ConfirmDialogWidget
from papirus_switcher.config import Settings
from papirus_switcher.core.catalog import DEFAULT_CATALOG, Catalog
from papirus_switcher.core.filter_view import FilterView
from papirus_switcher.core.state import SelectionState
from papirus_switcher.errors import ApplyError

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Where the picker is in its session."""
    BROWSING = auto()
    SEARCHING = auto()
    CONFIRMING = auto()
    APPLYING = auto()
    TERMINATED = auto()


class Outcome(Enum):
    APPLIED = auto()
    CANCELLED = auto()


@dataclass
class SessionResult:
    """How a picker session ended."""
    outcome: Outcome
    applied: Optional[str] = None


class PickerApp:
    """
    Folder color picker.
    
    Each loop iteration renders the screen, reads one key, interprets
    it and updates the selection state. Enter opens a confirmation
    dialog; confirming runs the backend with the terminal handed back
    in cooked mode. A failed apply shows an error box and the session
    continues; anything else ends it.
    """

    def __init__(
        self,
        backend: FolderColorBackend,
        catalog: Catalog = DEFAULT_CATALOG,
        settings: Optional[Settings] = None,
        input_reader: Optional[InputReader] = None,
        terminal: type[Terminal] = Terminal,
        registry: Optional[ShortcutRegistry] = None,
    ) -> None:
        self.backend = backend
        self.catalog = catalog
        self.settings = settings or Settings()
        self.input = input_reader or InputReader()
        self.terminal = terminal
        self.registry = registry or get_shortcut_registry()
        self.renderer = Renderer(catalog, self.settings, self.registry)

        self.state: Optional[SelectionState] = None
        self.phase = Phase.BROWSING
        self.result: Optional[SessionResult] = None

    def start(self) -> SelectionState:
        """Ask the backend for the active color and set up the state."""
        active = self.backend.query_active()
        self.state = SelectionState.start(self.catalog, active)
        if active is None or self.catalog.index_of(active) is None:
            logger.info("Active color unknown (%r); defaulting to %s",
                        active, self.catalog.entry_at(0).name)
        self.phase = Phase.BROWSING
        self.result = None
        return self.state

    def run(self) -> SessionResult:
        """Main application loop."""
        self.start()
        with self.terminal.managed_mode():
            while self.result is None:
                self.step()
        logger.info("Session ended: %s %s", self.result.outcome.name, self.result.applied or "")
        return self.result

    @property
    def session(self) -> SelectionState:
        """Selection state of the running session."""
        if self.state is None:
            raise RuntimeError("picker has not been started")
        return self.state

    def view(self) -> FilterView:
        return FilterView.compute(self.catalog, self.session.filter_text)

    def step(self) -> None:
        """Render, block for one key, act on it."""
        view = self.view()
        self.session.reanchor(view)
        self.terminal.draw(self._frame(view))

        event = self.input.read_blocking()
        action = interpret(event, self.phase == Phase.SEARCHING, bool(view), self.registry)
        self.handle_action(action, view)

    def handle_action(self, action: Action, view: FilterView) -> None:
        """Apply one action to the session."""
        state = self.session
        kind = action.kind

        if kind == ActionKind.NONE:
            return

        if self.phase == Phase.SEARCHING:
            if kind == ActionKind.TYPE_CHAR and action.char:
                state.type_char(action.char)
                state.follow_filter(self.view())
            elif kind == ActionKind.BACKSPACE:
                state.backspace()
                state.follow_filter(self.view())
            elif kind == ActionKind.MOVE_UP:
                state.move(view, -1)
            elif kind == ActionKind.MOVE_DOWN:
                state.move(view, 1)
            elif kind == ActionKind.CANCEL_SEARCH:
                state.cancel_search()
                self.phase = Phase.BROWSING
            elif kind == ActionKind.CONFIRM_SEARCH_SELECTION:
                state.confirm_search(view)
                self.phase = Phase.BROWSING
            return

        if kind in (ActionKind.MOVE_UP, ActionKind.MOVE_DOWN,
                    ActionKind.TOGGLE_SEARCH, ActionKind.EXIT):
            state.clear_error()

        if kind == ActionKind.MOVE_UP:
            state.move(view, -1)
        elif kind == ActionKind.MOVE_DOWN:
            state.move(view, 1)
        elif kind == ActionKind.TOGGLE_SEARCH:
            state.enter_search()
            self.phase = Phase.SEARCHING
        elif kind == ActionKind.EXIT:
            self._finish(SessionResult(Outcome.CANCELLED))
        elif kind == ActionKind.APPLY:
            self._confirm_and_apply(view)

    def _confirm_and_apply(self, view: FilterView) -> None:
        state = self.session
        if not view.contains(state.highlighted_index):
            return

        entry = state.highlighted_entry(self.catalog)
        self.phase = Phase.CONFIRMING

        size = self.terminal.size()
        backdrop = self._frame(view)
        dialog = ConfirmDialogWidget(entry, self.settings.truecolor, self.registry)
        confirmed = dialog.run(
            self.input.read_blocking,
            lambda box: self.terminal.draw(overlay_centered(backdrop, box, size.cols, size.rows)),
        )
        if not confirmed:
            self.phase = Phase.BROWSING
            return

        self.phase = Phase.APPLYING
        state.clear_error()
        try:
            with self.terminal.suspended():
                self.terminal.write(f"Setting {self.settings.theme} folder color to {entry.name}...\n")
                self.backend.apply(entry.name)
        except ApplyError as e:
            state.set_error(e.message)
            self.phase = Phase.BROWSING
            return

        self._finish(SessionResult(Outcome.APPLIED, entry.name))

    def _finish(self, result: SessionResult) -> None:
        self.result = result
        self.phase = Phase.TERMINATED

    def _frame(self, view: FilterView) -> list[str]:
        return self.renderer.frame(self.session, view, self.terminal.size())


def run_picker(
    backend: FolderColorBackend,
    settings: Optional[Settings] = None,
) -> SessionResult:
    """Launch the picker application."""
    app = PickerApp(backend, settings=settings)
    return app.run()
