"""Tests for SelectionState navigation, search and errors."""

import pytest

from papirus_switcher.core.catalog import DEFAULT_CATALOG, Catalog
from papirus_switcher.core.filter_view import FilterView
from papirus_switcher.core.state import SelectionState


class TestStart:
    """Tests for the initial state."""

    def test_starts_on_active(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "green")
        assert state.active_index == 1
        assert state.highlighted_index == 1
        assert state.filter_text == ""
        assert state.search_mode is False
        assert state.error_message is None

    @pytest.mark.parametrize("active", [None, "", "ultraviolet"])
    def test_unknown_active_defaults_to_first(self, rgb_catalog: Catalog, active) -> None:
        state = SelectionState.start(rgb_catalog, active)
        assert state.active_index == 0
        assert state.highlighted_index == 0

    def test_entries(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "blue")
        assert state.active_entry(rgb_catalog).name == "blue"
        assert state.highlighted_entry(rgb_catalog).name == "blue"


class TestMove:
    """Tests for clamped movement within a view."""

    def test_move_down_clamps_at_last(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "green")
        view = FilterView.compute(rgb_catalog, "")
        state.move(view, 1)
        assert state.highlighted_index == 2
        state.move(view, 1)
        assert state.highlighted_index == 2

    def test_move_up_clamps_at_first(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "green")
        view = FilterView.compute(rgb_catalog, "")
        state.move(view, -1)
        state.move(view, -1)
        assert state.highlighted_index == 0

    @pytest.mark.parametrize("text", ["", "e", "r", "grey", "o"])
    def test_never_leaves_view(self, text: str) -> None:
        view = FilterView.compute(DEFAULT_CATALOG, text)
        for start in view.indices:
            state = SelectionState(active_index=0, highlighted_index=start)
            for _ in range(len(DEFAULT_CATALOG) + 2):
                state.move(view, 1)
                assert view.contains(state.highlighted_index)
            assert state.highlighted_index == view.indices[-1]
            for _ in range(len(DEFAULT_CATALOG) + 2):
                state.move(view, -1)
                assert view.contains(state.highlighted_index)
            assert state.highlighted_index == view.indices[0]

    def test_moves_over_filtered_positions(self, blues_catalog: Catalog) -> None:
        view = FilterView.compute(blues_catalog, "bl")
        state = SelectionState(active_index=0, highlighted_index=2)
        state.move(view, 1)
        # Exact catalog index of bluegrey, not a view position
        assert state.highlighted_index == 3

    def test_move_in_empty_view_is_noop(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "green")
        state.move(FilterView.compute(rgb_catalog, "zzz"), 1)
        assert state.highlighted_index == 1

    def test_move_reanchors_hidden_cursor(self, blues_catalog: Catalog) -> None:
        state = SelectionState.start(blues_catalog, "red")
        view = FilterView.compute(blues_catalog, "bl")
        state.move(view, 1)
        assert state.highlighted_index == 3


class TestReanchor:
    """Tests for snapping a filtered-out cursor."""

    def test_snaps_to_first_visible(self, blues_catalog: Catalog) -> None:
        state = SelectionState.start(blues_catalog, "yellow")
        state.reanchor(FilterView.compute(blues_catalog, "bl"))
        assert state.highlighted_index == 2
        assert state.active_index == 4

    def test_visible_cursor_untouched(self, blues_catalog: Catalog) -> None:
        state = SelectionState(active_index=0, highlighted_index=3)
        state.reanchor(FilterView.compute(blues_catalog, "bl"))
        assert state.highlighted_index == 3

    def test_empty_view_keeps_cursor(self, blues_catalog: Catalog) -> None:
        state = SelectionState(active_index=0, highlighted_index=4)
        state.reanchor(FilterView.compute(blues_catalog, "zzz"))
        assert state.highlighted_index == 4


class TestSearch:
    """Tests for filter editing."""

    def test_typing_only_in_search_mode(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "red")
        state.type_char("x")
        assert state.filter_text == ""
        state.enter_search()
        state.type_char("b")
        state.type_char("l")
        assert state.filter_text == "bl"
        state.backspace()
        assert state.filter_text == "b"

    def test_backspace_on_empty_filter(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "red")
        state.enter_search()
        state.backspace()
        assert state.filter_text == ""

    def test_toggle_on_and_off_without_typing(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "green")
        state.enter_search()
        state.cancel_search()
        assert state.search_mode is False
        assert state.filter_text == ""
        assert state.highlighted_index == 1
        assert state.active_index == 1

    def test_cancel_clears_filter(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "green")
        state.enter_search()
        state.type_char("b")
        state.cancel_search()
        assert state.filter_text == ""

    def test_follow_filter_moves_visible_cursor_to_first(self, blues_catalog: Catalog) -> None:
        state = SelectionState.start(blues_catalog, "bluegrey")
        state.enter_search()
        state.type_char("b")
        state.follow_filter(FilterView.compute(blues_catalog, state.filter_text))
        assert state.highlighted_index == 2

    def test_follow_filter_without_matches_keeps_cursor(self, blues_catalog: Catalog) -> None:
        state = SelectionState.start(blues_catalog, "bluegrey")
        state.follow_filter(FilterView.compute(blues_catalog, "zz"))
        assert state.highlighted_index == 3

    def test_confirm_keeps_filter_and_visible_cursor(self, blues_catalog: Catalog) -> None:
        state = SelectionState.start(blues_catalog, "green")
        state.enter_search()
        state.type_char("b")
        state.type_char("l")
        state.confirm_search(FilterView.compute(blues_catalog, state.filter_text))
        assert state.search_mode is False
        assert state.filter_text == "bl"
        assert state.highlighted_index == 2


class TestErrors:
    """Tests for the error message."""

    def test_set_and_clear(self, rgb_catalog: Catalog) -> None:
        state = SelectionState.start(rgb_catalog, "red")
        state.set_error("not found")
        assert state.error_message == "not found"
        state.clear_error()
        assert state.error_message is None
